from __future__ import annotations

from ..core.context import RegistrationContext
from ..core.registry import ImplementorRegistry
from . import yew_properties

BUILTIN_MODULES = (yew_properties,)


def install_all(context: RegistrationContext) -> list[ImplementorRegistry]:
    return [module.install(context) for module in BUILTIN_MODULES]


__all__ = ["BUILTIN_MODULES", "install_all", "yew_properties"]

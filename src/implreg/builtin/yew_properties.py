"""Implementors of ``yew::html::component::properties::Properties`` across the documented crates."""

from __future__ import annotations

from ..core.context import RegistrationContext
from ..core.loader import load_registry
from ..core.registry import ImplementorRegistry

TRAIT_PATH = "yew::html::component::properties::Properties"

IMPLEMENTORS = {
    "monaco":[["impl&lt;OPT:&nbsp;<a class=\"trait\" href=\"https://doc.rust-lang.org/1.67.0/core/cmp/trait.PartialEq.html\" title=\"trait core::cmp::PartialEq\">PartialEq</a> + <a class=\"trait\" href=\"https://doc.rust-lang.org/1.67.0/core/clone/trait.Clone.html\" title=\"trait core::clone::Clone\">Clone</a> + <a class=\"trait\" href=\"https://doc.rust-lang.org/1.67.0/core/convert/trait.Into.html\" title=\"trait core::convert::Into\">Into</a>&lt;<a class=\"struct\" href=\"monaco/sys/editor/struct.IStandaloneEditorConstructionOptions.html\" title=\"struct monaco::sys::editor::IStandaloneEditorConstructionOptions\">IStandaloneEditorConstructionOptions</a>&gt;&gt; <a class=\"trait\" href=\"yew/html/component/properties/trait.Properties.html\" title=\"trait yew::html::component::properties::Properties\">Properties</a> for <a class=\"struct\" href=\"monaco/yew/struct.CodeEditorProps.html\" title=\"struct monaco::yew::CodeEditorProps\">CodeEditorProps</a>&lt;OPT&gt;"]],
    "stylist":[["impl <a class=\"trait\" href=\"yew/html/component/properties/trait.Properties.html\" title=\"trait yew::html::component::properties::Properties\">Properties</a> for <a class=\"struct\" href=\"stylist/yew/struct.GlobalProps.html\" title=\"struct stylist::yew::GlobalProps\">GlobalProps</a>"],["impl <a class=\"trait\" href=\"yew/html/component/properties/trait.Properties.html\" title=\"trait yew::html::component::properties::Properties\">Properties</a> for <a class=\"struct\" href=\"stylist/yew/struct.ManagerProviderProps.html\" title=\"struct stylist::yew::ManagerProviderProps\">ManagerProviderProps</a>"]],
    "swim":[["impl <a class=\"trait\" href=\"yew/html/component/properties/trait.Properties.html\" title=\"trait yew::html::component::properties::Properties\">Properties</a> for <a class=\"struct\" href=\"swim/ui/console/component/struct.Consoleprops.html\" title=\"struct swim::ui::console::component::Consoleprops\">Consoleprops</a>"],["impl <a class=\"trait\" href=\"yew/html/component/properties/trait.Properties.html\" title=\"trait yew::html::component::properties::Properties\">Properties</a> for <a class=\"struct\" href=\"swim/ui/regview/component/struct.Regviewprops.html\" title=\"struct swim::ui::regview::component::Regviewprops\">Regviewprops</a>"],["impl <a class=\"trait\" href=\"yew/html/component/properties/trait.Properties.html\" title=\"trait yew::html::component::properties::Properties\">Properties</a> for <a class=\"struct\" href=\"swim/struct.SwimEditorProps.html\" title=\"struct swim::SwimEditorProps\">SwimEditorProps</a>"],["impl <a class=\"trait\" href=\"yew/html/component/properties/trait.Properties.html\" title=\"trait yew::html::component::properties::Properties\">Properties</a> for <a class=\"struct\" href=\"swim/struct.Consoleprops.html\" title=\"struct swim::Consoleprops\">Consoleprops</a>"]],
    "yew":[],
}


def install(context: RegistrationContext) -> ImplementorRegistry:
    return load_registry(context, IMPLEMENTORS, trait_path=TRAIT_PATH)

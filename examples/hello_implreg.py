import time

import implreg
from implreg.builtin import yew_properties


def main() -> None:
    client = implreg.run(port=57794, builtin=True)
    if isinstance(client, implreg.ImplregServer):
        client = client.client()

    for trait in client.list_traits():
        print(f"{trait['trait']}: {trait['count']} implementors in {', '.join(trait['namespaces'])}")

    listed = client.get_implementors(yew_properties.TRAIT_PATH, current_crate="yew")
    for item in listed["implementors"]:
        print(f"  [{item['namespace']}] {item['subject']}")

    try:
        while True:
            time.sleep(3600)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()

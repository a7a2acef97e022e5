from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass, field

from action_delegate import (
    DelegateSlot,
    UnresolvedAction,
    classify_error,
    connect,
    override_config,
)


@dataclass
class ProductCatalog:
    """Stands in for a storage-backed source; counts every lookup."""

    categories: dict[str, list[str]] = field(
        default_factory=lambda: {"paint": ["red", "green"], "tiles": ["slate", "marble"]}
    )
    lookups: int = 0

    def options_for(self, select: SelectField, *, include_blank: bool = False) -> list[str]:
        self.lookups += 1
        values = list(self.categories.get(select.category, []))
        return [""] + values if include_blank else values


class SelectField:
    options = DelegateSlot("Returns the selectable values for this field.")

    def __init__(self, name: str, category: str) -> None:
        self.name = name
        self.category = category

    def render(self, *, include_blank: bool = False) -> str:
        values = self.options(self, include_blank=include_blank) if self.options else []
        return f"{self.name}: {', '.join(repr(v) for v in values)}"


def main() -> None:
    parser = argparse.ArgumentParser(description="Delegate select-field options to a catalog.")
    parser.add_argument("--render", action="store_true", help="Render the fields (runs the lookups).")
    parser.add_argument("--trace", action="store_true", help="Log each delegate invocation.")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.trace else logging.INFO)

    catalog = ProductCatalog()
    shared = connect(catalog, "options_for")

    color = SelectField("color", "paint")
    finish = SelectField("finish", "tiles")
    color.options = shared
    finish.options = shared
    print(f"lookups after wiring: {catalog.lookups}")

    if args.render:
        with override_config(log_invocations=args.trace):
            print(color.render(include_blank=True))
            print(finish.render())
        print(f"lookups after rendering: {catalog.lookups}")

    broken = SelectField("size", "paint")
    broken.options = connect(catalog, "sizes_for")
    try:
        broken.render()
    except UnresolvedAction as exc:
        envelope = classify_error(exc)
        print(f"{envelope.type.value}: {envelope.message}")


if __name__ == "__main__":
    main()

"""Closed variant families and the rules that pick a variant from raw JSON.

A family is either tagged (every member is a msgspec Struct declared with the
same ``tag_field``) or shaped (no member carries a tag). Shaped families pick
the member whose required wire keys are present; when several match, the one
whose key set contains all the others wins. Tagged families that reuse a tag
value for several members fall back to the shape rule among those members.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Any, get_args

import msgspec

from .codec import DecodeError, register_family


def signature(member: type) -> frozenset[str]:
    """Required wire keys of ``member``, excluding its tag."""
    return frozenset(
        field.encode_name for field in msgspec.structs.fields(member) if field.required
    )


class ShapeRule:
    def __init__(self, members: tuple[type, ...]) -> None:
        self.signatures = {member: signature(member) for member in members}

    def select(self, family: str, obj: dict[str, Any], path: str) -> type:
        present = obj.keys()
        candidates = [
            member for member, sig in self.signatures.items() if sig.issubset(present)
        ]
        if not candidates:
            raise DecodeError(
                f"No {family} variant matches fields {sorted(present)}",
                raw=obj,
                path=path,
            )
        best = [
            member
            for member in candidates
            if all(self.signatures[other] <= self.signatures[member] for other in candidates)
        ]
        if len(best) != 1:
            names = ", ".join(member.__name__ for member in candidates)
            raise DecodeError(
                f"Ambiguous {family}: fields {sorted(present)} match {names}",
                raw=obj,
                path=path,
            )
        return best[0]


class TagRule:
    def __init__(self, tag_field: str, members: tuple[type, ...]) -> None:
        self.tag_field = tag_field
        grouped: dict[Any, list[type]] = defaultdict(list)
        for member in members:
            grouped[member.__struct_config__.tag].append(member)
        self.by_tag: dict[Any, type | ShapeRule] = {
            tag: group[0] if len(group) == 1 else ShapeRule(tuple(group))
            for tag, group in grouped.items()
        }

    def select(self, family: str, obj: dict[str, Any], path: str) -> type:
        if self.tag_field not in obj:
            raise DecodeError(
                f"{family} is missing discriminant field `{self.tag_field}`",
                raw=obj,
                path=path,
            )
        tag = obj[self.tag_field]
        target = self.by_tag.get(tag) if isinstance(tag, (str, int)) else None
        if target is None:
            known = ", ".join(sorted(str(value) for value in self.by_tag))
            raise DecodeError(
                f"Unknown {family} `{self.tag_field}` value {tag!r} (expected one of {known})",
                raw=obj,
                path=path,
            )
        if isinstance(target, ShapeRule):
            return target.select(family, obj, path)
        return target


class VariantFamily:
    def __init__(self, name: str, members: tuple[type, ...]) -> None:
        self.name = name
        self.members = members
        tag_fields = {member.__struct_config__.tag_field for member in members}
        if tag_fields == {None}:
            self.rule: ShapeRule | TagRule = ShapeRule(members)
        elif len(tag_fields) == 1 and None not in tag_fields:
            (tag_field,) = tag_fields
            self.rule = TagRule(tag_field, members)
        else:
            raise TypeError(f"{name} mixes variants with different tag fields")

    def select(self, obj: Any, path: str) -> type:
        if not isinstance(obj, dict):
            raise DecodeError(
                f"Expected `object` for {self.name}, got `{type(obj).__name__}`",
                raw=obj,
                path=path,
            )
        return self.rule.select(self.name, obj, path)

    def __repr__(self) -> str:
        return f"VariantFamily({self.name!r}, {len(self.members)} variants)"


def variant_family(name: str, alias: Any) -> VariantFamily:
    """Declare ``alias`` (a union of Structs) as a closed family and register it."""
    members = get_args(alias)
    family = VariantFamily(name, members)
    register_family(members, family)
    return family


__all__ = ["ShapeRule", "TagRule", "VariantFamily", "signature", "variant_family"]

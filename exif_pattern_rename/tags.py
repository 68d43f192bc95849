"""
Template tokenizing: finding {tag} placeholders and splitting them apart.

A placeholder is one of:
    {Category}                      e.g. {Model}
    {Category.Property}             e.g. {DateTime.Year}
    {Category.Property.Property}    e.g. {File.ModTime.Year}
    {Alt1|Alt2|...}                 e.g. {DateTimeOriginal.Day|DateTime.Day}
"""

from typing import Iterable, List, NamedTuple, Tuple

OPEN_BRACE = "{"
CLOSE_BRACE = "}"
PROPERTY_SEPARATOR = "."
ALTERNATIVE_SEPARATOR = "|"

# scanner states
_OUTSIDE = 0
_INSIDE = 1


class TagReference(NamedTuple):
    """One parsed tag alternative, e.g. DateTime.Year."""
    raw: str
    name: str
    properties: Tuple[str, ...] = ()

    @property
    def first_property(self) -> str:
        return self.properties[0] if self.properties else ""


def extract_tags(template: str) -> List[str]:
    """
    Return the text of every {tag} in a template, in order, duplicates kept.

    An opening brace that is never closed produces nothing, and a brace
    opened inside a tag is kept as an ordinary character. Literal text is
    never validated, so malformed templates simply yield fewer tags.
    """
    tags = []
    state = _OUTSIDE
    buffer = []

    for char in template:
        if state == _OUTSIDE:
            if char == OPEN_BRACE:
                buffer = []
                state = _INSIDE
            continue

        if char == CLOSE_BRACE:
            tags.append("".join(buffer))
            state = _OUTSIDE
        else:
            buffer.append(char)

    return tags


def distinct_tags(tags: Iterable[str]) -> List[str]:
    """Drop repeated tags, keeping the order in which they were first seen."""
    return list(dict.fromkeys(tags))


def parse_tag_properties(tag: str) -> Tuple[str, Tuple[str, ...]]:
    """Split 'Category.Prop1.Prop2' into ('Category', ('Prop1', 'Prop2'))."""
    category, *properties = tag.split(PROPERTY_SEPARATOR)
    return category, tuple(properties)


def parse_tag_group(tag: str) -> List[TagReference]:
    """Split a '|'-separated tag into its alternatives, left to right."""
    references = []
    for alternative in tag.split(ALTERNATIVE_SEPARATOR):
        name, properties = parse_tag_properties(alternative)
        references.append(TagReference(alternative, name, properties))
    return references


def replace_tag_in_pattern(pattern: str, tag: str, value: str) -> str:
    """Replace every {tag} occurrence in the pattern with value."""
    return pattern.replace(OPEN_BRACE + tag + CLOSE_BRACE, value)

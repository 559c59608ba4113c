"""Label policies: what a detected link shows to the user.

A policy is either a fixed string or a function of the link's URL. With no
policy the matched text is shown verbatim, so a detector that normalizes
targets (adding a scheme, lower-casing a host) never changes what the user
sees unless asked to.

Example:
    >>> resolve_label(None, "http://www.x.com", "www.x.com")
    'www.x.com'
    >>> resolve_label(FixedLabel("Click here"), "http://www.x.com", "www.x.com")
    'Click here'
    >>> resolve_label(DerivedLabel(str.upper), "http://x.com", "x.com")
    'HTTP://X.COM'

"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class FixedLabel:
    """Show the same text for every link."""

    text: str


@dataclass(frozen=True, slots=True)
class DerivedLabel:
    """Compute the shown text from the link's URL.

    The function's result is used verbatim, including an empty string.
    Returning a string is the caller's responsibility.

    """

    func: Callable[[str], str]


LabelPolicy: TypeAlias = FixedLabel | DerivedLabel


def as_label_policy(
    value: LabelPolicy | str | Callable[[str], str] | None,
) -> LabelPolicy | None:
    """Coerce a plain string, callable, or policy into a LabelPolicy.

    Args:
        value: A policy instance, a fixed label string, a ``url -> label``
            callable, or None for the default (matched text)

    Returns:
        The equivalent LabelPolicy, or None

    Raises:
        TypeError: If value is none of the accepted forms

    """
    if value is None or isinstance(value, FixedLabel | DerivedLabel):
        return value
    if isinstance(value, str):
        return FixedLabel(value)
    if callable(value):
        return DerivedLabel(value)
    raise TypeError(
        f"label policy must be a string, a callable or None, not {type(value).__name__}"
    )


def resolve_label(policy: LabelPolicy | None, url: str, matched_text: str) -> str:
    """Resolve the display text for one link."""
    match policy:
        case None:
            return matched_text
        case FixedLabel(text=text):
            return text
        case DerivedLabel(func=func):
            return func(url)


__all__ = [
    "DerivedLabel",
    "FixedLabel",
    "LabelPolicy",
    "as_label_policy",
    "resolve_label",
]

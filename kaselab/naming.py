"""
Display names for cases.

A display name is a pure function of a case and a label set:

    prefix + separator.join(label + delimiter + render(value)) + postfix

It is used as the test identifier handed to the host runner. Names do not
have to be unique (runners disambiguate duplicates), but they are stable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from kaselab.labels import DELIMITER_DEFAULT, KaseLabels

if TYPE_CHECKING:
    from kaselab.kase import Kase


def render_value(value: Any) -> str:
    """Return the human-readable form of a case value."""
    return str(value)


def display_name(kase: Kase, labels: KaseLabels | None = None) -> str:
    """
    Render the display name of a case.

    Args:
        kase: The case to name.
        labels: Label set of the same arity. When omitted, the case's own
            element labels are used with the default formatting.

    Returns:
        The display name, e.g. ``"[a1: 1 | a2: x]"``.

    Raises:
        ArityMismatchError: If *labels* has a different arity than *kase*.
    """
    if labels is None:
        labels = KaseLabels(labels=kase.labels)
    else:
        labels.require_arity(len(kase.elements))

    parts = (
        f"{label}{labels.delimiter}{render_value(element.value)}"
        for label, element in zip(labels.labels, kase.elements)
    )
    return f"{labels.prefix}{labels.separator.join(parts)}{labels.postfix}"


def display_names(kase: Kase, delimiter: str = DELIMITER_DEFAULT) -> list[str]:
    """Return ``"label<delimiter>value"`` for each element of *kase*."""
    return [
        f"{element.label}{delimiter}{render_value(element.value)}"
        for element in kase.elements
    ]

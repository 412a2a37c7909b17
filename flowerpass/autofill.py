"""
Best-effort filling of a password field on a page.

The page is described by PageDocument, an adapter over whatever host
environment exposes the form (a browser bridge, an accessibility API, a test
double). Filling never raises: it reports whether a field was found.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from . import config

logger = logging.getLogger(__name__)


@dataclass
class InputField:
    """A form element as seen by the fill heuristic."""
    tag: str = "input"
    type: str = ""
    name: str = ""
    id: str = ""
    visible: bool = True
    disabled: bool = False
    readonly: bool = False
    value: str = field(default="", repr=False)
    events: List[str] = field(default_factory=list)

    @property
    def is_input(self) -> bool:
        return self.tag.lower() == "input"

    @property
    def input_type(self) -> str:
        return self.type.lower()

    def set_value(self, value: str) -> None:
        """Focus, set the value and dispatch the change notifications."""
        self.events.append("focus")
        self.value = value
        self.events.extend(config.FILL_EVENTS)


@dataclass
class PageDocument:
    """One frame of a page: its fields in document order and the focused one."""
    fields: List[InputField] = field(default_factory=list)
    active_element: Optional[InputField] = None
    is_top_frame: bool = True


def _has_password_hint(element: InputField) -> bool:
    name = element.name.lower()
    element_id = element.id.lower()
    return any(hint in name or hint in element_id for hint in config.PASSWORD_FIELD_HINTS)


def find_password_field(document: PageDocument) -> Optional[InputField]:
    """
    Pick the field a password should go into.

    Priority:
        1. the focused element, if it is an input
        2. the first visible, enabled, writable password input
        3. the first visible text input whose name or id looks like a password
        4. any password input at all
    """
    active = document.active_element
    if active is not None and active.is_input:
        return active

    inputs = [f for f in document.fields if f.is_input]
    password_inputs = [f for f in inputs if f.input_type == "password"]

    for element in password_inputs:
        if element.visible and not element.disabled and not element.readonly:
            return element

    for element in inputs:
        if element.input_type in config.TEXT_INPUT_TYPES and element.visible and _has_password_hint(element):
            return element

    if password_inputs:
        return password_inputs[0]
    return None


def fill_password(document: PageDocument, password: str) -> bool:
    """
    Put the password into the most likely field.

    Returns:
        True if a field was filled, False otherwise
    """
    try:
        target = find_password_field(document)
        if target is None:
            # Only the top frame reports, to keep iframes quiet
            if document.is_top_frame:
                logger.info("No password field found in top frame.")
            return False
        target.set_value(password)
        logger.info("Filled password field.")
        return True
    except Exception as e:
        logger.error(f"Autofill failed: {e}", exc_info=True)
        return False

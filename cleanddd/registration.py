"""
Event registration.

A RegistrationForm holds the option a visitor has picked on one event detail
view. The selection lives only as long as the form object; submitting it
produces a receipt and clears the selection. Nothing is stored.

Whether registration is open is fixed in the event data, the form never
opens or closes it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from cleanddd.model import Event, RegistrationOption


class RegistrationError(ValueError):
    """
    Base class for rejected registration actions.
    """


class NoOptionSelected(RegistrationError):
    def __init__(self) -> None:
        super().__init__("Please select a registration type")


class RegistrationClosed(RegistrationError):
    def __init__(self, event_title: str) -> None:
        super().__init__(f"Registration for {event_title} is currently closed")


class OptionUnavailable(RegistrationError):
    pass


@dataclass(frozen=True)
class RegistrationReceipt:
    event_id: str
    event_title: str
    option_type: str
    price: str

    @property
    def message(self) -> str:
        return f"You have registered for {self.event_title} ({self.option_type})"


class RegistrationForm:
    def __init__(self, event: Event) -> None:
        self.event = event
        self._selected: Optional[RegistrationOption] = None

    @property
    def is_open(self) -> bool:
        return self.event.registration.open

    @property
    def selected(self) -> Optional[RegistrationOption]:
        return self._selected

    def available_options(self) -> List[RegistrationOption]:
        if not self.is_open:
            return []
        return [o for o in self.event.registration.options if o.available]

    def select(self, option_type: str) -> RegistrationOption:
        """
        Pick a registration option by its type label.

        Sold-out and unknown options are rejected, as is any selection while
        registration is closed. A rejected call keeps the previous selection.
        """
        if not self.is_open:
            raise RegistrationClosed(self.event.title)

        for option in self.event.registration.options:
            if option.type != option_type:
                continue
            if not option.available:
                raise OptionUnavailable(f"{option.type} is sold out")
            self._selected = option
            return option

        raise OptionUnavailable(f"Unknown registration type: {option_type!r}")

    def submit(self) -> RegistrationReceipt:
        """
        Submit the current selection.

        Raises NoOptionSelected when nothing was picked; the form is left unchanged.
        """
        if not self.is_open:
            raise RegistrationClosed(self.event.title)
        if self._selected is None:
            raise NoOptionSelected()

        receipt = RegistrationReceipt(
            event_id=self.event.id,
            event_title=self.event.title,
            option_type=self._selected.type,
            price=self._selected.price,
        )
        self._selected = None
        return receipt

    def reset(self) -> None:
        self._selected = None

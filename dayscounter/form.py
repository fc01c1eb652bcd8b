"""Reactive state behind the days counter form.

Inputs are set one at a time; every output is a pure function of the current
inputs and is recomputed when one of its inputs changes. Subscribers receive
``(name, value)`` for each output whose value changed. The form knows nothing
about the widget toolkit that displays it.
"""

import logging
import math
from datetime import date
from pathlib import Path
from typing import Any, Callable

from dayscounter import date_calculator
from dayscounter.config import DaysCounterConfig
from dayscounter.exceptions import ExportError
from dayscounter.models.event import EventRecord
from dayscounter.output.ics_writer import ICSWriter
from dayscounter.reporting import ErrorReporter, LoggingErrorReporter

logger = logging.getLogger(__name__)

Subscriber = Callable[[str, Any], None]

DATE_INPUTS = ("begin", "end", "span_start", "birth_date", "day_of_year_date", "today")

# output name -> inputs it depends on
DEPENDENCIES: dict[str, tuple[str, ...]] = {
    "difference_text": ("begin", "end"),
    "span_result": ("span_start", "span_days"),
    "age_text": ("birth_date", "today"),
    "day_of_year_text": ("day_of_year_date",),
}


class DaysCounterForm:
    """Inputs, derived outputs and the export action of the main form."""

    def __init__(
        self,
        today: date | None = None,
        config: DaysCounterConfig | None = None,
        reporter: ErrorReporter | None = None,
        writer: ICSWriter | None = None,
    ):
        self.config = config or DaysCounterConfig()
        self.reporter = reporter or LoggingErrorReporter()
        self.writer = writer or ICSWriter(self.config)

        today = date_calculator.to_date(today or date.today())
        self._inputs: dict[str, Any] = {name: today for name in DATE_INPUTS}
        self._inputs["span_days"] = 0
        self._outputs: dict[str, Any] = {}
        self._subscribers: list[Subscriber] = []

        for output in DEPENDENCIES:
            self._outputs[output] = self._compute(output)

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback`` and return a function that removes it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _publish(self, name: str, value: Any) -> None:
        for callback in list(self._subscribers):
            callback(name, value)

    # ------------------------------------------------------------------
    # Inputs and outputs
    # ------------------------------------------------------------------

    def get(self, name: str) -> Any:
        """Current value of an input or output."""
        if name in self._inputs:
            return self._inputs[name]
        if name in self._outputs:
            return self._outputs[name]
        raise KeyError(f"Unknown form field: {name}")

    def set(self, name: str, value: Any) -> None:
        """Set an input and recompute the outputs that depend on it."""
        if name not in self._inputs:
            raise KeyError(f"Unknown form input: {name}")
        if name in DATE_INPUTS:
            value = date_calculator.to_date(value)
        elif not isinstance(value, (int, float)):
            raise TypeError(f"span_days must be a number, got {type(value).__name__}")
        elif not math.isfinite(value):
            raise ValueError(f"span_days must be finite, got {value}")

        previous = self._inputs[name]
        if previous == value:
            return
        self._inputs[name] = value

        # Either every dependent output moves to the new input or none does
        updated = {}
        for output, inputs in DEPENDENCIES.items():
            if name not in inputs:
                continue
            try:
                updated[output] = self._compute(output)
            except OverflowError as e:
                self._inputs[name] = previous
                self.reporter.error("The resulting date is out of range.", e)
                return

        for output, new_value in updated.items():
            if new_value != self._outputs.get(output):
                self._outputs[output] = new_value
                self._publish(output, new_value)

    def _compute(self, output: str) -> Any:
        i = self._inputs
        if output == "difference_text":
            days = date_calculator.days_between(i["begin"], i["end"])
            return f"Difference {days:,} days."
        if output == "span_result":
            return date_calculator.add_days(i["span_start"], i["span_days"])
        if output == "age_text":
            days = date_calculator.age_in_days(i["birth_date"], today=i["today"])
            return f"You are {days:,} days old."
        if output == "day_of_year_text":
            day = date_calculator.day_of_year(i["day_of_year_date"])
            return f"Day {day} of the current year."
        raise KeyError(f"Unknown form output: {output}")

    @property
    def difference_text(self) -> str:
        return self._outputs["difference_text"]

    @property
    def span_result(self) -> date:
        return self._outputs["span_result"]

    @property
    def span_result_text(self) -> str:
        return self.span_result.strftime(self.config.date_format)

    @property
    def age_text(self) -> str:
        return self._outputs["age_text"]

    @property
    def day_of_year_text(self) -> str:
        return self._outputs["day_of_year_text"]

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def build_event(self) -> EventRecord:
        """Event for the date computed on the span tab."""
        return EventRecord.for_span(
            start=self._inputs["span_start"],
            days=self._inputs["span_days"],
            target=self.span_result,
            date_format=self.config.date_format,
        )

    def export_event(self, path: Path | str) -> Path | None:
        """Export the span result as a full-day event.

        Returns:
            The written path, or None if the export failed (already reported)
        """
        event = self.build_event()
        try:
            written = self.writer.write(event, Path(path))
        except ExportError as e:
            self.reporter.error("Error exporting calendar entry.", e)
            return None
        logger.info(f"Calendar entry exported to {written}")
        return written


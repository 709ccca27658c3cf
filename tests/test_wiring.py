from typing import Annotated, Optional

import pytest

from sprig.errors import AmbiguousBeanError
from sprig.markers import INJECT
from sprig.registry import AmbiguityPolicy, BeanRegistry
from sprig.wiring import DependencyWirer


class Printer:
    pass


class ConsolePrinter(Printer):
    pass


class FilePrinter(Printer):
    pass


class Clock:
    pass


class Reporter:
    printer: Annotated[Printer, INJECT]
    clock: Annotated[Optional[Clock], INJECT]


class Chicken:
    egg: "Annotated[Egg, INJECT]"


class Egg:
    chicken: Annotated[Chicken, INJECT]


class Narcissist:
    admirer: "Annotated[Narcissist, INJECT]"


class Preconfigured:
    clock: Annotated[Clock, INJECT]

    def __init__(self):
        self.clock = "system clock"


def registry_of(*beans, policy=AmbiguityPolicy.FIRST_REGISTERED) -> BeanRegistry:
    registry = BeanRegistry(policy)
    for bean in beans:
        registry.add(bean)
    return registry


@pytest.fixture
def wirer() -> DependencyWirer:
    return DependencyWirer()


def test_slots_are_filled_with_compatible_beans(wirer):
    reporter, printer, clock = Reporter(), ConsolePrinter(), Clock()

    unfilled = wirer.wire(registry_of(reporter, printer, clock))

    assert reporter.printer is printer
    assert reporter.clock is clock
    assert unfilled == []


def test_mutual_references_resolve_regardless_of_order(wirer):
    egg, chicken = Egg(), Chicken()

    wirer.wire(registry_of(egg, chicken))

    assert chicken.egg is egg
    assert egg.chicken is chicken


def test_slot_of_own_type_is_wired_to_itself(wirer):
    narcissist = Narcissist()

    wirer.wire(registry_of(narcissist))

    assert narcissist.admirer is narcissist


def test_unmatched_slot_is_left_empty_and_reported(wirer, log_messages):
    reporter, printer = Reporter(), FilePrinter()

    unfilled = wirer.wire(registry_of(reporter, printer))

    assert reporter.printer is printer
    assert reporter.clock is None
    assert len(unfilled) == 1
    assert unfilled[0].bean is reporter
    assert unfilled[0].slot.name == "clock"
    assert ("DEBUG", "No bean for slot Reporter.clock (Clock)") in log_messages


def test_unmatched_slot_keeps_existing_value(wirer):
    bean = Preconfigured()

    unfilled = wirer.wire(registry_of(bean))

    assert bean.clock == "system clock"
    assert [u.slot.name for u in unfilled] == ["clock"]


def test_matched_slot_overrides_constructor_value(wirer):
    bean, clock = Preconfigured(), Clock()

    wirer.wire(registry_of(bean, clock))

    assert bean.clock is clock


def test_first_registered_candidate_fills_ambiguous_slot(wirer):
    reporter, file_printer, console_printer = Reporter(), FilePrinter(), ConsolePrinter()

    wirer.wire(registry_of(reporter, file_printer, console_printer))

    assert reporter.printer is file_printer


def test_fail_fast_policy_raises_on_ambiguous_slot(wirer):
    registry = registry_of(
        Reporter(), FilePrinter(), ConsolePrinter(), policy=AmbiguityPolicy.FAIL_FAST
    )

    with pytest.raises(AmbiguousBeanError, match="Printer"):
        wirer.wire(registry)


def test_beans_without_slots_are_untouched(wirer):
    printer = ConsolePrinter()

    assert wirer.wire(registry_of(printer)) == []
    assert vars(printer) == {}

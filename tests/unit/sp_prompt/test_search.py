import pytest

from sp_prompt.system import search as search_module
from sp_prompt.system.choices import ChoiceList
from sp_prompt.system.models import Choice, Separator
from sp_prompt.system.search import SEARCH_EXPIRY_SECONDS, SearchJumpHandler

pytestmark = pytest.mark.unit_prompt


@pytest.fixture
def choices() -> ChoiceList:
    return ChoiceList(
        [
            Choice("alpha", name="Alpha"),
            Choice("bravo", name="Bravo"),
            Separator(),
            Choice("charlie", name="Charlie", disabled=True),
        ]
    )


def test_search_schedules_a_single_expiry_timer(choices, scheduler) -> None:
    handler = SearchJumpHandler(scheduler)

    assert handler.search(choices, "B") == 1
    assert handler.buffer == "b"
    assert handler.search(choices, "r") == 1
    assert handler.buffer == "br"

    assert len(scheduler.timers) == 2
    assert scheduler.timers[0].cancelled is True
    assert len(scheduler.pending) == 1
    assert scheduler.pending[0].due == pytest.approx(SEARCH_EXPIRY_SECONDS)


def test_expiry_clears_buffer_and_notifies(choices, scheduler) -> None:
    expired: list[bool] = []
    handler = SearchJumpHandler(scheduler, on_expire=lambda: expired.append(True))

    handler.search(choices, "a")
    assert scheduler.advance(0.5) == 0
    assert handler.buffer == "a"

    assert scheduler.advance(0.25) == 1
    assert handler.buffer == ""
    assert handler.timer_pending is False
    assert expired == [True]


def test_scheduler_drops_spent_timers_when_advancing(choices, scheduler) -> None:
    handler = SearchJumpHandler(scheduler)
    for char in "brav":
        handler.search(choices, char)
    assert len(scheduler.timers) == 4

    scheduler.advance(0.1)
    assert scheduler.timers == scheduler.pending
    assert len(scheduler.timers) == 1

    scheduler.advance(1.0)
    assert scheduler.timers == []
    assert handler.buffer == ""


def test_search_without_match_keeps_buffer_and_timer(choices, scheduler) -> None:
    handler = SearchJumpHandler(scheduler)

    assert handler.search(choices, "c") is None  # Charlie is disabled
    assert handler.buffer == "c"
    assert handler.timer_pending is True


def test_jump_resets_buffer_and_cancels_timer(choices, scheduler) -> None:
    handler = SearchJumpHandler(scheduler)
    handler.search(choices, "b")

    assert handler.jump(choices, 1) == 0
    assert handler.buffer == ""
    assert scheduler.pending == []


@pytest.mark.parametrize("digit", [0, 3, 4, 9])
def test_jump_to_missing_or_unselectable_item_is_noop(choices, scheduler, digit) -> None:
    handler = SearchJumpHandler(scheduler)
    assert handler.jump(choices, digit) is None


def test_reset_and_close_are_idempotent(choices, scheduler) -> None:
    handler = SearchJumpHandler(scheduler)
    handler.reset()
    handler.search(choices, "a")
    handler.close()
    handler.close()

    assert handler.buffer == ""
    assert scheduler.pending == []


def test_expiry_can_be_overridden_from_environment(
    monkeypatch: pytest.MonkeyPatch, scheduler
) -> None:
    monkeypatch.setenv("SP_SEARCH_EXPIRY_MS", "1500")
    assert search_module.search_expiry_seconds() == pytest.approx(1.5)

    monkeypatch.setenv("SP_SEARCH_EXPIRY_MS", "-1")
    assert search_module.search_expiry_seconds() == SEARCH_EXPIRY_SECONDS

    monkeypatch.setenv("SP_SEARCH_EXPIRY_MS", "soon")
    assert search_module.search_expiry_seconds() == SEARCH_EXPIRY_SECONDS

from timekeeping.attendance.factory import BreakStrategyFactory
from timekeeping.attendance.strategies.exact_break_strategy import ExactBreakStrategy
from timekeeping.attendance.strategies.excess_break_strategy import ExcessBreakStrategy
from timekeeping.attendance.strategies.short_break_strategy import ShortBreakStrategy
from timekeeping.attendance.strategies.unscheduled_strategy import UnscheduledDayStrategy


def test_factory_picks_unscheduled_strategy_regardless_of_recorded_break():
    factory = BreakStrategyFactory()

    strategy = factory.for_day(is_scheduled_break_day=False, recorded_break_minutes=200, scheduled_break_minutes=0)

    assert isinstance(strategy, UnscheduledDayStrategy)


def test_factory_on_scheduled_day():
    factory = BreakStrategyFactory()

    short = factory.for_day(is_scheduled_break_day=True, recorded_break_minutes=90, scheduled_break_minutes=120)
    excess = factory.for_day(is_scheduled_break_day=True, recorded_break_minutes=150, scheduled_break_minutes=120)
    exact = factory.for_day(is_scheduled_break_day=True, recorded_break_minutes=120, scheduled_break_minutes=120)

    assert isinstance(short, ShortBreakStrategy)
    assert isinstance(excess, ExcessBreakStrategy)
    assert isinstance(exact, ExactBreakStrategy)


def test_short_break_never_goes_below_zero():
    decision = ShortBreakStrategy().reconcile(worked_minutes=30, recorded_break_minutes=0, scheduled_break_minutes=120)

    assert decision.worked_minutes == 0
    assert decision.break_minutes == 120
    assert decision.automatic_break_detected is True


def test_unscheduled_day_without_break_changes_nothing():
    decision = UnscheduledDayStrategy().reconcile(worked_minutes=300, recorded_break_minutes=0, scheduled_break_minutes=0)

    assert decision.worked_minutes == 300
    assert decision.ignored_break_minutes == 0
    assert decision.break_minutes == 0

import logging

from fixed_step_loop import FixedStepLoop


class FakeScheduler:
    def __init__(self):
        self.requests = []
        self.cancelled = 0

    def request_frame(self, callback):
        self.requests.append(callback)

    def cancel(self):
        self.cancelled += 1


class FakeEffect:
    def __init__(self):
        self.calls = []

    def update(self):
        self.calls.append("update")

    def draw(self, screen):
        self.calls.append(("draw", screen))

    def get_particle_counts(self):
        return 0, 0, 0


def make_loop(time_step=8, log_interval=500):
    scheduler = FakeScheduler()
    effect = FakeEffect()
    screen = object()
    loop = FixedStepLoop(effect, screen, scheduler, time_step, log_interval=log_interval)
    return loop, effect, scheduler, screen


def test_idle_until_started():
    loop, effect, scheduler, _ = make_loop()
    assert not loop.running
    assert scheduler.requests == []

    loop.start()

    assert loop.running
    assert scheduler.requests == [loop.on_frame]


def test_second_start_is_ignored():
    loop, _, scheduler, _ = make_loop()
    loop.start()
    loop.start()
    assert len(scheduler.requests) == 1


def test_steps_once_after_threshold_crossed():
    loop, effect, scheduler, screen = make_loop()
    loop.start()

    # Deltas of 0, 3, 3 and 3 ms: the sum passes 8 on the last callback only.
    for timestamp in (0, 3, 6):
        loop.on_frame(timestamp)
        assert effect.calls == []
    loop.on_frame(9)

    assert effect.calls == ["update", ("draw", screen)]
    assert loop.time_since_last_step == 0
    assert loop.tick == 1


def test_threshold_is_strict():
    loop, effect, _, _ = make_loop()
    loop.start()
    loop.on_frame(8)
    assert effect.calls == []
    loop.on_frame(9)
    assert effect.calls[0] == "update"


def test_one_step_per_callback_even_after_long_gap():
    loop, effect, _, _ = make_loop()
    loop.start()
    loop.on_frame(1000)
    assert effect.calls.count("update") == 1
    assert loop.time_since_last_step == 0


def test_reschedules_every_callback():
    loop, _, scheduler, _ = make_loop()
    loop.start()
    for timestamp in (0, 3, 16, 17, 40):
        loop.on_frame(timestamp)
    # Initial request plus one per callback.
    assert len(scheduler.requests) == 6


def test_stop_cancels_and_halts_rescheduling():
    loop, effect, scheduler, _ = make_loop()
    loop.start()
    loop.stop()

    assert not loop.running
    assert scheduler.cancelled == 1

    loop.on_frame(100)
    assert effect.calls == []
    assert len(scheduler.requests) == 1


class PlainEffect:
    def __init__(self):
        self.updates = 0

    def update(self):
        self.updates += 1

    def draw(self, screen):
        pass


def debug_logging(monkeypatch, caplog):
    # Records reach caplog through the root logger.
    monkeypatch.setattr(logging.getLogger("fireworks"), "propagate", True)
    return caplog.at_level(logging.DEBUG, logger="fireworks")


def tick_summaries(caplog):
    return [r.getMessage() for r in caplog.records if r.getMessage().startswith("Tick=")]


def test_throttled_tick_summary(monkeypatch, caplog):
    loop, _, _, _ = make_loop(log_interval=2)
    loop.start()
    with debug_logging(monkeypatch, caplog):
        for timestamp in (10, 20, 30, 40):
            loop.on_frame(timestamp)

    summaries = tick_summaries(caplog)
    assert len(summaries) == 2
    assert summaries[0].startswith("Tick=2,")
    assert "RiseParticles=0" in summaries[0]


def test_plain_effect_runs_past_log_interval(monkeypatch, caplog):
    effect = PlainEffect()
    loop = FixedStepLoop(effect, object(), FakeScheduler(), 8)
    loop.start()
    with debug_logging(monkeypatch, caplog):
        for step in range(1, 501):
            loop.on_frame(step * 10)

    assert effect.updates == 500
    summaries = tick_summaries(caplog)
    assert len(summaries) == 1
    assert summaries[0].startswith("Tick=500,")
    assert "RiseParticles" not in summaries[0]


def test_tick_summary_skipped_when_debug_disabled():
    class CountingEffect(FakeEffect):
        def __init__(self):
            super().__init__()
            self.count_requests = 0

        def get_particle_counts(self):
            self.count_requests += 1
            return 0, 0, 0

    effect = CountingEffect()
    loop = FixedStepLoop(effect, object(), FakeScheduler(), 8, log_interval=1)
    logger = logging.getLogger("fireworks")
    previous_level = logger.level
    logger.setLevel(logging.INFO)
    try:
        loop.start()
        for timestamp in (10, 20, 30):
            loop.on_frame(timestamp)
    finally:
        logger.setLevel(previous_level)

    assert loop.tick == 3
    assert effect.count_requests == 0

import pytest

from app.errors import NotLoaded, SourceUnavailable
from app.state import EngineState, LetterStatus
from services.typing_engine import TypingEngine
from services.word_source import WordSource
from tests.conftest import FakeClock

U, C, X = LetterStatus.UNKNOWN, LetterStatus.CORRECT, LetterStatus.INCORRECT


def all_unknown(engine):
    return all(st is U for row in engine.letter_status for st in row)


class TestLoading:
    def test_load_words_makes_engine_ready(self, engine):
        assert engine.status is EngineState.READY
        assert len(engine.state.words) == 3
        assert engine.state.index == 0
        assert engine.current_input == ""
        assert not engine.clock.running

    def test_grid_matches_words(self, engine):
        assert len(engine.letter_status) == len(engine.state.words)
        for word, row in zip(engine.state.words, engine.letter_status):
            assert len(row) == len(word)
        assert all_unknown(engine)

    def test_words_published_to_late_subscriber(self, engine):
        seen = []
        engine.words.subscribe(seen.append)
        assert seen == [engine.state.words]

    def test_load_sequence_with_count(self, engine):
        engine.load_sequence(5)
        assert len(engine.state.words) == 5

    def test_keeps_injected_source_before_load(self, write_words):
        src = WordSource(write_words(["cat", "dog"]))
        clock = FakeClock()
        eng = TypingEngine(source=src, clock=clock)
        assert eng.source is src
        assert eng.clock is clock
        eng.load_words(2)
        assert sorted(eng.state.words) == ["cat", "dog"]

    def test_unreadable_source_leaves_engine_idle(self, tmp_path):
        eng = TypingEngine(source=WordSource(tmp_path / "missing.txt"), clock=FakeClock())
        with pytest.raises(SourceUnavailable):
            eng.load_words()
        assert eng.status is EngineState.IDLE

    def test_sequence_before_load_raises(self, tmp_path):
        eng = TypingEngine(source=WordSource(tmp_path / "missing.txt"), clock=FakeClock())
        with pytest.raises(NotLoaded):
            eng.load_sequence()


class TestInput:
    def test_record_input_marks_letters(self, engine):
        target = engine.current_word
        wrong = "#" if target[1] != "#" else "%"
        engine.record_input(target[0] + wrong)
        row = engine.letter_status[0]
        assert row[0] is C
        assert row[1] is X
        assert all(st is U for st in row[2:])

    def test_shorter_input_leaves_later_positions_untouched(self, engine):
        target = engine.current_word
        engine.record_input(target[:2])
        engine.record_input(target[:1])
        row = engine.letter_status[0]
        assert row[0] is C
        assert row[1] is C
        assert engine.current_input == target[:1]

    def test_extra_characters_only_in_buffer(self, engine):
        target = engine.current_word
        engine.record_input(target + "zz")
        assert engine.current_input == target + "zz"
        assert len(engine.letter_status[0]) == len(target)
        assert all(st is C for st in engine.letter_status[0])

    def test_exact_match_then_complete_has_no_errors(self, engine):
        target = engine.current_word
        engine.record_input(target)
        engine.complete_current_word()
        assert X not in engine.letter_status[0]
        assert engine.state.index == 1
        assert engine.current_input == ""
        assert engine.state.typed == [target]

    def test_skipped_letters_become_incorrect(self, engine):
        target = engine.current_word
        engine.record_input(target[:1])
        engine.complete_current_word()
        row = engine.letter_status[0]
        assert row[0] is C
        assert all(st is X for st in row[1:])
        assert U not in row

    def test_empty_word_marks_everything_incorrect(self, engine):
        engine.complete_current_word()
        assert all(st is X for st in engine.letter_status[0])
        assert engine.state.typed == [""]

    def test_clear_current_word_styling(self, engine):
        engine.record_input(engine.current_word)
        engine.clear_current_word_styling()
        assert all(st is U for st in engine.letter_status[0])
        assert engine.current_input == ""
        assert engine.state.index == 0

    def test_clear_last_character_styling(self, engine):
        target = engine.current_word
        engine.record_input(target[:2])
        engine.clear_last_character_styling()
        row = engine.letter_status[0]
        assert row[0] is C
        assert row[1] is U

    def test_clear_last_character_with_empty_buffer_is_noop(self, engine):
        engine.clear_last_character_styling()
        assert all_unknown(engine)

    def test_clear_last_character_past_word_end(self, engine):
        target = engine.current_word
        engine.record_input(target + "q")
        engine.clear_last_character_styling()
        assert all(st is C for st in engine.letter_status[0])


class TestLifecycle:
    def test_start_is_idempotent(self, engine):
        engine.start()
        engine.start()
        assert engine.status is EngineState.RUNNING
        assert engine.clock.starts == 1

    def test_reset_clears_everything(self, engine):
        engine.start()
        old = engine.state.words
        engine.record_input("x")
        engine.complete_current_word()
        engine.record_input("y")
        engine.reset()
        assert all_unknown(engine)
        assert engine.current_input == ""
        assert engine.state.index == 0
        assert engine.state.typed == []
        assert engine.status is EngineState.RUNNING
        assert engine.clock.restarts == 1
        assert len(engine.state.words) == len(old)

    def test_reset_publishes_new_sequence(self, engine):
        seen = []
        engine.words.subscribe(seen.append)
        engine.start()
        engine.reset()
        assert len(seen) == 2
        assert seen[0] is not seen[1]
        assert seen[1] == engine.state.words

    def test_abandoned_run_keeps_stats(self, engine):
        engine.start()
        engine.clock.now_ms = 5000
        engine.complete_current_word()
        engine.reset()
        assert not engine.stats.value.is_defined
        assert engine.last_run is None

    def test_full_run_publishes_stats(self, engine):
        seen = []
        engine.stats.subscribe(seen.append)
        engine.start()
        words = engine.state.words
        for i, word in enumerate(words):
            engine.clock.now_ms = 1000 * (i + 1)
            engine.record_input(word)
            engine.complete_current_word()
        stats = seen[-1]
        assert stats.is_defined
        assert stats.accuracy == 100.0
        assert stats.all_words == len(words)
        assert stats.incorrect_words == 0
        assert stats.all_letters == sum(len(w) for w in words)
        assert engine.last_run.words == words
        assert engine.last_run.word_times_ms == (1000, 2000, 3000)
        # the last word rolls over into a fresh running sequence
        assert engine.status is EngineState.RUNNING
        assert engine.state.index == 0
        assert all_unknown(engine)

    def test_full_run_with_zero_elapsed_keeps_stats(self, engine):
        engine.start()
        for word in engine.state.words:
            engine.record_input(word)
            engine.complete_current_word()
        assert not engine.stats.value.is_defined

    def test_reset_keeps_requested_count(self, engine):
        engine.load_sequence(5)
        engine.reset()
        assert len(engine.state.words) == 5

    def test_end_when_not_running_is_noop(self, engine):
        engine.end()
        assert engine.status is EngineState.READY

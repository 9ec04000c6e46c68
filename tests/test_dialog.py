import pygame
import pytest

from spritequest.dialog import (
    CHAR_DELAY_MS,
    DIALOG_BOX_HEIGHT,
    FULL_TEXT,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Typewriter,
    main,
    render_dialog_box,
    visible_lines,
    wrap_text_to_fit,
)


@pytest.fixture
def font():
    pygame.font.init()
    yield pygame.font.Font(None, 24)
    pygame.font.quit()


def test_wrap_keeps_words_in_order():
    wrapped = wrap_text_to_fit(FULL_TEXT, 20, len)
    assert wrapped.replace("\n", " ") == " ".join(FULL_TEXT.split())


def test_wrap_lines_fit_width():
    wrapped = wrap_text_to_fit(FULL_TEXT, 20, len)
    for line in wrapped.split("\n"):
        assert len(line) <= 20 or " " not in line


def test_wrap_worked_example():
    assert wrap_text_to_fit("aaa bbb ccc", 10, len) == "aaa bbb\nccc"


def test_wrap_long_word_gets_own_line():
    assert wrap_text_to_fit("abcdefghijkl xy", 5, len) == "abcdefghijkl\nxy"


def test_wrap_wide_enough_is_one_line():
    assert wrap_text_to_fit(FULL_TEXT, 1000, len) == FULL_TEXT


def test_wrap_empty():
    assert wrap_text_to_fit("", 10, len) == ""


def test_visible_lines_cuts_text():
    assert visible_lines("ab\ncd", 4) == ["ab", "c"]
    assert visible_lines("ab\ncd", 100) == ["ab", "cd"]
    assert visible_lines("ab", 0) == []


def test_visible_lines_negative_raises():
    with pytest.raises(ValueError):
        visible_lines("ab", -1)


def test_typewriter_waits_for_delay():
    tw = Typewriter(text_length=5, last_char_time=0)
    assert tw.advance(CHAR_DELAY_MS) == 1
    assert tw.advance(CHAR_DELAY_MS + 1) == 2
    assert tw.last_char_time == CHAR_DELAY_MS + 1


def test_typewriter_stops_at_length():
    tw = Typewriter(text_length=3)
    for step in range(1, 20):
        tw.advance(step * (CHAR_DELAY_MS + 1))
    assert tw.chars_shown == 3


def test_render_box_geometry_and_colour(font):
    target = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    target.fill((100, 149, 237))
    box = render_dialog_box(target, font, "", 0)
    assert box.height == DIALOG_BOX_HEIGHT
    assert box.bottom == SCREEN_HEIGHT - 20
    assert tuple(target.get_at(box.center))[:3] == (0, 0, 0)
    assert tuple(target.get_at((5, 5)))[:3] == (100, 149, 237)


def test_render_draws_text(font):
    target = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    box = render_dialog_box(target, font, "Hello\nWorld", 11)
    bright = [
        (x, y)
        for x in range(box.left, box.right)
        for y in range(box.top, box.bottom)
        if target.get_at((x, y))[0] > 128
    ]
    assert bright
    assert all(box.collidepoint(p) for p in bright)


def test_main_fails_without_font(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    assert main(["--font", str(tmp_path / "missing.ttf")]) == 1
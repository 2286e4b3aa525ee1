import pytest
from colorama import Fore
from wordler.datasets import Dictionary
from wordler.engine import Mark, classify, pattern, absent_letters, normalize, validate_guess, render_guess
from wordler.errors import GuessError, MalformedGuess, UnknownGuess

G, Y, A = Mark.EXACT, Mark.PRESENT, Mark.ABSENT

# --- golden feedback ("appears anywhere" rule for PRESENT) ---
@pytest.mark.parametrize("guess,secret,expected", [
    ("CRANE", "CRANE", "GGGGG"),
    ("TRACE", "CRANE", "-GGYG"),
    ("GRAPE", "APPLE", "--YYG"),
    ("LEVEL", "LEMON", "GG-YY"),
    ("EERIE", "CRANE", "YYY-G"),
    ("MOUNT", "APPLE", "-----"),
])
def test_classify_golden(guess, secret, expected):
    assert pattern(classify(guess, secret)) == expected

def test_classify_exact_match_is_all_exact():
    assert classify("CRANE", "CRANE") == [G] * 5

def test_classify_trace_against_crane():
    assert classify("TRACE", "CRANE") == [A, G, G, Y, G]

def test_repeated_letter_marked_present_every_time():
    # LEMON has a single L and a single E; both extra copies in LEVEL still show
    marks = classify("LEVEL", "LEMON")
    assert marks[3] is Y and marks[4] is Y

def test_absent_letters():
    marks = classify("GRAPE", "APPLE")
    assert absent_letters("GRAPE", marks) == {"G", "R"}

# --- normalization ---
@pytest.mark.parametrize("raw,expected", [
    ("apple", "APPLE"),
    ("  apple\n", "APPLE"),
    ("ApPlE", "APPLE"),
    ("a.p-p l!e", "APPLE"),
    ("crâne", "CRNE"),
    ("", ""),
])
def test_normalize(raw, expected):
    assert normalize(raw) == expected

@pytest.mark.parametrize("raw", ["apple", " Tr4ce ", "x", "HELLO world", "éclair"])
def test_normalize_idempotent(raw):
    once = normalize(raw)
    assert normalize(once) == once

# --- validation ---
DICT = Dictionary(["APPLE", "GRAPE", "CRANE"])

@pytest.mark.parametrize("raw", ["apple", "  Grape\n", "c-r-a-n-e"])
def test_validate_guess_accepts_dictionary_words(raw):
    g = validate_guess(raw, DICT)
    assert g in DICT and len(g) == 5

@pytest.mark.parametrize("raw", ["app", "apples", "", "12345"])
def test_validate_guess_wrong_length(raw):
    with pytest.raises(MalformedGuess, match="must be 5 letters"):
        validate_guess(raw, DICT)

def test_validate_guess_unknown_word():
    with pytest.raises(UnknownGuess, match="ZZZZZ isn't in the dictionary"):
        validate_guess("zzzzz", DICT)

def test_guess_errors_are_value_errors():
    assert issubclass(MalformedGuess, GuessError)
    assert issubclass(UnknownGuess, ValueError)

# --- rendering ---
def test_render_guess_plain():
    assert render_guess("TRACE", classify("TRACE", "CRANE"), enabled=False) == "TRACE"

def test_render_guess_colored():
    out = render_guess("TRACE", classify("TRACE", "CRANE"))
    assert Fore.RED + "T" in out
    assert Fore.GREEN + "R" in out
    assert Fore.YELLOW + "C" in out

import pytest

from wiki_scraper.rules import RuleSet, build_rules, load_rules
from wiki_scraper.text_processing import CHECKS, validate


def accepted(rules, text):
    return validate(text, rules).accepted


def reason(rules, text):
    return validate(text, rules).reason


def test_check_order():
    assert [name for name, _ in CHECKS][:12] == [
        "min_trimmed_length",
        "word_count",
        "needs_letter_start",
        "needs_uppercase_start",
        "quote_start_with_letter",
        "needs_punctuation_end",
        "may_end_with_colon",
        "symbols",
        "broken_whitespace",
        "min_characters",
        "even_symbols",
        "disallowed_words",
    ]


def test_first_failing_check_is_the_reason():
    rules = RuleSet(min_trimmed_length=3)

    # also ends with a colon, but length is checked first
    assert reason(rules, "a:") == "min_trimmed_length"


def test_accepted_outcome_has_no_reason():
    outcome = validate("Perfectly fine.", RuleSet())

    assert outcome.accepted
    assert outcome.reason is None


def test_min_trimmed_length():
    rules = RuleSet(min_trimmed_length=3)

    assert reason(rules, "  aa     ") == "min_trimmed_length"
    assert accepted(rules, "  aaa     ")


def test_min_word_count():
    rules = RuleSet(min_word_count=2)

    assert reason(rules, "one") == "word_count"
    assert accepted(rules, "two words")


def test_max_word_count():
    rules = RuleSet(max_word_count=2)

    assert reason(rules, "three words now") == "word_count"
    assert accepted(rules, "two words")


def test_min_characters():
    rules = RuleSet(min_characters=3)

    assert reason(rules, "no!!") == "min_characters"
    assert accepted(rules, "yes!")


def test_may_end_with_colon():
    assert reason(RuleSet(may_end_with_colon=False), "ends with colon:") == "may_end_with_colon"
    assert accepted(RuleSet(may_end_with_colon=True), "ends with colon:")


def test_quote_start_with_letter():
    text = '"\U0001F60A foo'

    assert accepted(RuleSet(quote_start_with_letter=False, needs_letter_start=False), text)
    assert reason(RuleSet(quote_start_with_letter=True, needs_letter_start=False), text) == "quote_start_with_letter"
    assert accepted(RuleSet(quote_start_with_letter=True, needs_letter_start=False), '"Quoted" words')


def test_needs_punctuation_end():
    off = RuleSet(needs_punctuation_end=False)
    on = RuleSet(needs_punctuation_end=True)

    assert accepted(off, "This has no punctuation")
    assert reason(on, "This has no punctuation") == "needs_punctuation_end"
    assert accepted(on, "This has punctuation.")
    assert accepted(on, "Is this a question?")
    assert accepted(on, 'He said "yes."')


def test_needs_letter_start():
    assert accepted(RuleSet(needs_letter_start=False), "?Foo")
    assert reason(RuleSet(needs_letter_start=True), "?Foo") == "needs_letter_start"
    assert accepted(RuleSet(needs_letter_start=True), "This has a normal start")


def test_needs_uppercase_start():
    assert accepted(RuleSet(needs_uppercase_start=False), "foo")
    assert reason(RuleSet(needs_uppercase_start=True), "foo") == "needs_uppercase_start"
    assert accepted(RuleSet(needs_uppercase_start=True), "Foo")


def test_disallowed_symbols():
    rules = RuleSet(disallowed_symbols=frozenset("%"))

    assert accepted(rules, "This has no percentage but other & characters")
    assert reason(rules, "This has a %") == "symbols"


def test_allowed_symbols_regex():
    rules = build_rules({"allowed_symbols_regex": "[ -Z]"})

    assert accepted(rules, "ONLY UPPERCASE AND SPACE IS ALLOWED")
    assert reason(rules, "This is not uppercase") == "symbols"


def test_allowed_symbols_regex_wins_over_disallowed():
    rules = build_rules({"allowed_symbols_regex": "[ -Z]", "disallowed_symbols": ["O"]})

    assert accepted(rules, "ONLY UPPERCASE AND SPACE IS ALLOWED AND DISALLOWED O IS OKAY")


def test_broken_whitespace():
    rules = RuleSet(broken_whitespace=("  ",))

    assert accepted(rules, "This has no broken whitespace")
    assert reason(rules, "This has  broken whitespace") == "broken_whitespace"


def test_disallowed_words():
    rules = RuleSet().with_words(["blerg"])

    assert reason(rules, "This has blerg") == "disallowed_words"
    assert not accepted(rules, "This has a capital bLeRg")
    assert not accepted(rules, "This has many blergs blerg blerg blerg")
    assert not accepted(rules, "Here is a blerg, with comma")
    assert accepted(rules, "This hasn't bl e r g")


def test_disallowed_words_with_apostrophe():
    rules = RuleSet().with_words(["a's"])

    assert not accepted(rules, "This has a's")


def test_disallowed_words_case_sensitive():
    rules = RuleSet(disallowed_words_case_sensitive=True).with_words(["Blerg"])

    assert not accepted(rules, "This has Blerg")
    assert accepted(rules, "This has blerg")


def test_uneven_quotes_allowed_by_default():
    assert accepted(RuleSet(), 'This has "uneven quotes and it is fine!')


def test_even_symbols():
    rules = RuleSet(even_symbols=('"', "("))

    assert reason(rules, 'This has "uneven quotes and it is not fine!') == "even_symbols"
    assert not accepted(rules, "This has (uneven parenthesis and it is not fine!")
    assert accepted(rules, 'This has "even" quotes and it is fine!')


def test_even_symbols_every_symbol_must_pair():
    rules = RuleSet(even_symbols=('"', "'"))

    assert not accepted(rules, "This has \"uneven quotes' and it is fine!")
    assert not accepted(rules, "This has \"uneven\" quotes' and it is fine!")


def test_disallowed_patterns():
    rules = build_rules({"disallowed_patterns": ["[A-Z]{2}"]})

    assert accepted(rules, "This no two following uppercase letters")
    assert reason(rules, "This has two FOllowing uppercase letters") == "disallowed_patterns"


def test_numbers():
    assert accepted(RuleSet(), "This contains 1 number")
    assert reason(RuleSet(may_contain_numbers=False), "This contains 1 number") == "numbers"


@pytest.mark.parametrize("text", [
    "",
    '"\U0001F60A',
    "This ends with:",
    " AA ",
    "This has broken  space",
    "This as well !",
    "And this ;",
    "This is gonna be way way way way way way way way way way too long",
    "This contains 1 number",
    "foo\n\nfoo",
    "foo\\foo",
    "foo<>",
    "foo*@",
    "A.B",
    "S.T.A.L.K.E.R.",
    "He was greeted by Mr.",
    "The match ended Arsenal vs.",
])
def test_english_rejects(text):
    assert not accepted(load_rules("english"), text)


@pytest.mark.parametrize("text", [
    "This is absolutely valid.",
    "this is lowercase",
    "Dr. Smith lives in a small town.",
])
def test_english_accepts(text):
    assert accepted(load_rules("english"), text)


@pytest.mark.parametrize("text", [
    "",
    "This ends with:",
    "This does not end with a period",
    "?This does not start with a letter",
    "this starts with lowercase",
    "This has broken  space.",
    "Short",
    "No!!!",
    "This contains 1 number.",
    "foo«",
    "Some sentence that ends with A.",
    "Elle habite chez Mme.",
])
def test_french_rejects(text):
    assert not accepted(load_rules("french"), text)


def test_french_accepts():
    assert accepted(load_rules("french"), "This is absolutely validé.")


@pytest.mark.parametrize("text", [
    "Französische Satzzeichen werden ignorierté.",
    "Andere Satzzeichen wie Åblabla werden auch ignoriert.",
    "Γεια σας",
    "Sätze dürfen keine Wörter mit nur einem B Buchstaben haben.",
    "A auch nicht am Anfang.",
    "Oder am Ende e.",
    "AmSi ist eine schwarze Masse, isomorph mit LaSi",
    "Kein deutsches Wort: ambiguous.",
    "Bundesliga am Anfang eines Satzes.",
    "Liga am Anfang eines Satzes.",
    "Im 3. Jahrhundert begann es.",
    "Satzzeichen in der Mitte. Wird nicht akzeptiert.",
    "Satzzeichen in der Mitte? Wird nicht akzeptiert.",
    "Satzzeichen in der Mitte! Wird nicht akzeptiert.",
    "Die Aussperrung ist nach Art.",
    "Remy & Co.",
    "Es ist die sog.",
    "Abkürzung am Ende hl.",
    "Abkürzung am Ende geb.",
    "Das war im Jahr 5 v. Chr. so.",
    "Das ist z.B. gut.",
])
def test_german_rejects(text):
    assert not accepted(load_rules("german"), text)


def test_german_accepts():
    assert accepted(load_rules("german"), "Dies ist ein korrekter Satz.")

from railledger.command import Command


def test_tokens_in_order():
    cmd = Command("  alpha beta   gamma")
    assert list(cmd) == ["alpha", "beta", "gamma"]
    assert cmd.cnt == 3


def test_next_token_then_empty():
    cmd = Command("one two")
    assert cmd.next_token() == "one"
    assert cmd.next_token() == "two"
    assert cmd.next_token() == ""
    assert cmd.next_token() == ""


def test_carriage_return_ends_line():
    cmd = Command("a b\r")
    assert cmd.cnt == 2
    assert list(cmd) == ["a", "b"]


def test_custom_delimiter():
    cmd = Command("x|y|z", "|")
    assert cmd.cnt == 3
    assert list(cmd) == ["x", "y", "z"]


def test_empty_text():
    cmd = Command()
    assert cmd.cnt == 0
    assert cmd.next_token() == ""


def test_count_is_stable():
    cmd = Command("p q r s")
    first = cmd.count()
    assert first == 4
    second = cmd.count()
    assert second == 4
    assert cmd.cnt == 4


def test_clear_resets_state():
    cmd = Command("a|b", "|")
    cmd.next_token()
    cmd.clear()
    assert cmd.buffer == "" and cmd.cur == 0 and cmd.cnt == 0
    assert cmd.delimiter == " "


def test_set_delimiter_changes_split():
    cmd = Command("a,b c")
    cmd.set_delimiter(",")
    assert cmd.next_token() == "a"
    assert cmd.next_token() == "b c"


def test_str_shows_state():
    cmd = Command("hi there")
    cmd.next_token()
    assert str(cmd) == f"buffer: hi there cur: {cmd.cur} delimiter:  "
    assert cmd.cur == len("hi ")


def test_timestamp_defaults_and_is_settable():
    cmd = Command("[12] login")
    stamp = cmd.next_token()
    cmd.timestamp = int(stamp[1:-1])
    assert cmd.timestamp == 12
    assert cmd.next_token() == "login"
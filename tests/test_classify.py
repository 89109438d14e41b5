"""Tests for line classification."""

from chat_normalizer.classify import classify_line, classify_window


class TestClassifyLine:
    def test_discord_line(self):
        result = classify_line("[10:30 AM] John: Hey what's up")
        assert result.matched_format == "discord"
        assert result.timestamp == "10:30 AM"
        assert result.sender == "John"
        assert result.content == "Hey what's up"
        assert result.consumed == 1

    def test_whatsapp_time_first(self):
        result = classify_line("10:30 AM - John: Hey what's up")
        assert result.matched_format == "whatsapp1"
        assert (result.timestamp, result.sender) == ("10:30 AM", "John")

    def test_whatsapp_sender_first(self):
        result = classify_line("John, 10:30 AM: Hey what's up")
        assert result.matched_format == "whatsapp2"
        assert (result.timestamp, result.sender) == ("10:30 AM", "John")

    def test_generic_parenthesized_time(self):
        result = classify_line("John (10:30): Hey what's up")
        assert result.matched_format == "generic1"
        assert (result.timestamp, result.sender, result.content) == ("10:30", "John", "Hey what's up")

    def test_fields_are_raw(self):
        result = classify_line('[10:30am] "John": hi')
        assert result.timestamp == "10:30am"
        assert result.sender == '"John"'

    def test_no_match(self):
        assert classify_line("just some chatter") is None

    def test_multiline_rule_needs_embedded_break(self):
        assert classify_line("John Doe") is None
        result = classify_line("John Doe\n10:30 AM\nHey what's up")
        assert result.matched_format == "imessage"
        assert result.sender == "John Doe"

    def test_first_rule_wins(self):
        # Matches both discord and standard
        assert classify_line("[10:30] John: hi").matched_format == "discord"


class TestClassifyWindow:
    def test_imessage_header(self):
        lines = ["John Doe", "10:30 AM", "Hey what's up"]
        result = classify_window(lines, 0)
        assert result.matched_format == "imessage"
        assert result.consumed == 3
        assert (result.timestamp, result.sender, result.content) == ("10:30 AM", "John Doe", "Hey what's up")

    def test_slack_header(self):
        result = classify_window(["John 10:30 AM", "Hey what's up"], 0)
        assert result.matched_format == "slack"
        assert result.consumed == 2
        assert (result.timestamp, result.sender) == ("10:30 AM", "John")

    def test_telegram_header(self):
        result = classify_window(["John [10:30]", "Hey what's up"], 0)
        assert result.matched_format == "telegram"
        assert (result.timestamp, result.sender) == ("10:30", "John")

    def test_sms_without_space_before_time(self):
        result = classify_window(["John10:30", "Hey what's up"], 0)
        assert result.matched_format == "sms"
        assert (result.timestamp, result.sender) == ("10:30", "John")

    def test_window_past_end_is_skipped(self):
        assert classify_window(["John 10:30 AM"], 0) is None

    def test_header_cannot_swallow_a_message_line(self):
        lines = ["see you at 5", "[10:31 AM] Jane: ok"]
        assert classify_window(lines, 0) is None
        assert classify_window(lines, 1).matched_format == "discord"

    def test_single_line_rules_ignore_following_lines(self):
        lines = ["[10:30 AM] John: Hey", "more text"]
        result = classify_window(lines, 0)
        assert result.matched_format == "discord"
        assert result.consumed == 1

    def test_index_selects_line(self):
        lines = ["noise", "10:30 AM - John: hi"]
        assert classify_window(lines, 0) is None
        assert classify_window(lines, 1).sender == "John"

    def test_message_line_is_never_a_header(self):
        # "10:45" alone would complete an iMessage header starting at line 0
        lines = ["[10:30 AM] John: meet at", "10:45", "ok then"]
        result = classify_window(lines, 0)
        assert result.matched_format == "discord"
        assert result.consumed == 1
        assert result.sender == "John"

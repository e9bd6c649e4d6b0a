from botwire.codec import convert, encode
from botwire.methods import SendMessage
from botwire.objects import (
    InlineKeyboardBuilder,
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    ReplyMarkup,
    WebAppInfo,
    callback_button,
    inline_keyboard,
    url_button,
)


class TestInlineKeyboardBuilder:
    def test_rows_and_buttons(self) -> None:
        markup = (
            InlineKeyboardBuilder()
            .button("Yes", callback_data="yes")
            .button("No", callback_data="no")
            .row(url_button("Docs", "https://core.telegram.org/bots/api"))
            .build()
        )
        assert encode(markup) == {
            "inline_keyboard": [
                [
                    {"text": "Yes", "callback_data": "yes"},
                    {"text": "No", "callback_data": "no"},
                ],
                [{"text": "Docs", "url": "https://core.telegram.org/bots/api"}],
            ]
        }

    def test_button_after_row_extends_that_row(self) -> None:
        markup = (
            InlineKeyboardBuilder()
            .row(callback_button("a", "1"))
            .button("b", callback_data="2")
            .build()
        )
        assert [[b.text for b in row] for row in markup.inline_keyboard] == [["a", "b"]]

    def test_empty_rows_are_dropped(self) -> None:
        markup = InlineKeyboardBuilder().row().row(callback_button("a", "1")).build()
        assert len(markup.inline_keyboard) == 1

    def test_web_app_button(self) -> None:
        markup = InlineKeyboardBuilder().button("Open", web_app=WebAppInfo(url="https://x")).build()
        assert encode(markup)["inline_keyboard"][0][0] == {
            "text": "Open",
            "web_app": {"url": "https://x"},
        }


def test_inline_keyboard_function() -> None:
    markup = inline_keyboard(
        [callback_button("1", "one"), callback_button("2", "two")],
        [url_button("site", "https://example.com")],
    )
    assert isinstance(markup, InlineKeyboardMarkup)
    assert markup.inline_keyboard[1][0] == InlineKeyboardButton(
        text="site", url="https://example.com"
    )


def test_keyboard_in_request_round_trips() -> None:
    markup = inline_keyboard([callback_button("ok", "ok")])
    request = SendMessage(chat_id=1, text="pick", reply_markup=markup)
    decoded = convert(encode(request), SendMessage)
    assert decoded.reply_markup == markup
    assert isinstance(convert(encode(markup), ReplyMarkup), InlineKeyboardMarkup)

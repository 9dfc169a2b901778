from rullm.commands.chat_prompt import ChatPrompt, PromptEditMode


def test_left_prompt_normal():
    left = ChatPrompt().render_prompt_left()
    assert "You:" in left
    assert left.endswith(" ")


def test_left_prompt_multiline():
    assert ChatPrompt(multiline_mode=True).render_prompt_left() == "... "


def test_right_prompt_empty():
    assert ChatPrompt().render_prompt_right() == ""


def test_indicators():
    prompt = ChatPrompt()
    assert prompt.render_prompt_indicator(PromptEditMode.DEFAULT) == "> "
    assert prompt.render_prompt_indicator(PromptEditMode.EMACS) == "> "
    assert prompt.render_prompt_indicator(PromptEditMode.VI_NORMAL) == "< "
    assert prompt.render_prompt_indicator(PromptEditMode.VI_INSERT) == "> "


def test_custom_indicator_wraps_name():
    assert ChatPrompt().render_prompt_indicator("visual") == "(visual) "


def test_multiline_indicator():
    assert ChatPrompt().render_prompt_multiline_indicator() == "... "


def test_history_search_indicator():
    prompt = ChatPrompt()
    assert prompt.render_prompt_history_search_indicator("foo") == "(reverse-search: foo) "
    assert (
        prompt.render_prompt_history_search_indicator("foo", failing=True)
        == "(failing reverse-search: foo) "
    )
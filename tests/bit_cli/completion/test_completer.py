# tests/bit_cli/completion/test_completer.py
from prompt_toolkit.completion import CompleteEvent
from prompt_toolkit.document import Document

from bit_cli.completion import BitCompleter, CompletionRouter, Suggestion, freeze_suggestion_map


def _completer():
    smap = freeze_suggestion_map(
        {
            "": [Suggestion("status", "Show status"), Suggestion("save", "Commit all")],
            "checkout": [Suggestion("main", "current branch")],
        }
    )
    return BitCompleter(CompletionRouter(smap, lambda cmd, prefix: []))


def test_completions_replace_word_before_cursor():
    doc = Document("checkout ma")
    comps = list(_completer().get_completions(doc, CompleteEvent()))
    assert [c.text for c in comps] == ["main"]
    assert comps[0].start_position == -2
    assert comps[0].display_meta_text == "current branch"


def test_first_word_completion():
    doc = Document("s")
    comps = list(_completer().get_completions(doc, CompleteEvent()))
    assert [c.text for c in comps] == ["status", "save"]
    assert all(c.start_position == -1 for c in comps)

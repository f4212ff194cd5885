# bit_cli/completion/completer.py
from prompt_toolkit.completion import Completer, Completion

from bit_cli.completion.router import CompletionRouter, word_before_cursor


class BitCompleter(Completer):
    """prompt_toolkit adapter around :class:`CompletionRouter`."""

    def __init__(self, router: CompletionRouter):
        self.router = router

    def get_completions(self, document, complete_event):
        before = document.text_before_cursor
        word = word_before_cursor(before)
        for suggestion in self.router.suggest(before):
            yield Completion(
                suggestion.text,
                start_position=-len(word),
                display_meta=suggestion.description,
            )

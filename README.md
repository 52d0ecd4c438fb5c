# minishell

Pieces of a small shell, usable as a plain Python library with no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `minishell.chars`: ASCII character classification and case conversion.
  Each function takes a one-character string or an integer code:
  `is_alnum`, `is_alpha`, `is_ascii`, `is_digit`, `is_print`, `is_space`,
  `is_word_separator` (space, newline, tab), `to_lower`, `to_upper`.
- `minishell.memory`: byte buffer helpers: `find_byte`, `compare_bytes`,
  `fill`, `zero`, `zeroed`, `copy_bytes`, `move_bytes`. Byte counts that are
  negative or larger than a buffer raise `ValueError`.
- `minishell.strings`: `atoi` (leading decimal integer, 0 when there is
  none), `itoa`, `split` (on one character, dropping empty words),
  `strtrim`, `substr`, `map_chars`, `iter_chars`, `process_args` (join
  arguments with spaces and split them again) and `count_args`.
- `minishell.search`: `find_char`, `rfind_char`, `find_bounded`,
  `compare_n`, `compare`, `same_number` (numerals equal once a leading `+`
  is dropped), `concat_bounded` and `copy_bounded` (return the text and the
  length the full result would have had), and `skip_blanks`.
- `minishell.output`: `format_string` and `printf` expand `%c %s %p %d %i
  %u %x %X %%`; `%d`/`%i` wrap to 32-bit signed and `%u`/`%x`/`%X` to
  32-bit unsigned values, `%s` of `None` gives `(null)` and `%p` of a false
  value gives `(nil)`. `printf` returns the number of characters written.
  Also `to_base`, `put_char`, `put_str`, `put_endl` and `put_number`. All
  writers take an optional `stream` (standard output by default).
- `minishell.quotes`: `QuoteState`, `has_quotes`, `unquoted_length` and
  `remove_quotes`, which strips the quotes that open and close quoted
  sections and keeps a quote found inside the other kind.
- `minishell.errors`: messages prefixed with `minishell: `:
  `command_error_message` and `report_command_error` (detail shown in
  `` `...' `` for `export` and `unset`), `error_message` and
  `report_error`, `syntax_error`, plus `needs_detail_quotes` and
  `join_strs`. The `report_*` functions write to standard error unless a
  `stream` is given; `report_command_error` returns the code it was passed.
- `minishell.redirect`: `StreamRedirection`, a dataclass holding a
  command's input and output files and descriptors. `redirect()` saves the
  current standard input and output and points them at `input_fd` and
  `output_fd`; `restore()` puts the saved descriptors back; `files_ok()`
  says whether every named file was opened. It also works as a context
  manager.

## Examples

```python
from minishell.quotes import remove_quotes
from minishell.errors import command_error_message
from minishell.output import format_string

remove_quotes("'hello'\" world\"")
# 'hello world'

command_error_message("export", "1abc", "not a valid identifier")
# "minishell: export: `1abc': not a valid identifier"

format_string("%d in hex is %x", 255, 255)
# '255 in hex is ff'
```

## What it does not do

This is a library of parts, not a shell. It has no command to run, no
prompt or input loop, no tokenizer or command parser, no variable
expansion, no environment handling, no built-in commands, no pipes or
here-documents, no signal handling, and it does not start programs.
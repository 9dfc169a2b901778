# rullm

`rullm` is a library of building blocks for a command-line tool that talks to
LLM providers. It holds the configuration file, prompt templates with
`{{placeholder}}` substitution and their on-disk store, level-aware coloured
messages, a terminal spinner, and the slash commands, completion and prompt
text of an interactive chat.

## Installation

```
pip install .
```

The only dependency is `tomli-w`, used to write TOML files.

## Configuration

`rullm.config.Config` is kept in `config.toml` and has two settings:
`default_model` (default `"openai/gpt-4o-mini"`) and `vi_mode` (default
`False`).

```python
from rullm.config import Config

config = Config.load("/path/to/config-dir")   # writes a default file if none exists
config.vi_mode = True
config.save("/path/to/config-dir")
```

The module also names the files the tool uses: `CONFIG_FILE_NAME`,
`MODEL_FILE_NAME`, `ALIASES_CONFIG_FILE`, `KEYS_CONFIG_FILE` and
`TEMPLATES_DIR_NAME`.

## Choosing a model and a query

`rullm.cli_helpers` has:

- `resolve_model(global_model, cmd_model, default_model)`: the first of the
  three that is not `None`; raises `ValueError` if all are `None`.
- `resolve_direct_query_model(global_model, default_model)`: the same with two.
- `merge_stdin_and_query(query, stdin=None)`: when standard input is piped and
  not blank, its text comes first and the query is appended on a new line.

## Templates

A template has a `name`, an optional `user_prompt`, an optional
`system_prompt`, `defaults` and an optional `description`.

```python
from rullm.template import Template

template = Template(
    "review",
    user_prompt="Review: {{input}}",
    system_prompt="You are a {{role}}",
    defaults={"role": "reviewer"},
)
rendered = template.render_input("def f(): pass")
rendered.user_prompt    # "Review: def f(): pass"
rendered.system_prompt  # "You are a reviewer"
```

`render(params)` takes values from `params`, then from `defaults`, and raises
`TemplateError` naming every placeholder left without a value.
`get_placeholders()` and `extract_placeholders(text)` list placeholder names in
order of first appearance. Placeholder names are letters, digits, `_` and `-`.
`Template.from_toml` and `to_toml` read and write the TOML form.

`rullm.template_store.TemplateStore(base_path)` keeps one `<name>.toml` file per
template in a `templates` directory, with `load`, `save` (written atomically),
`delete`, `get`, `list` and `contains`. Files that fail to parse are skipped
with a warning. `resolve_template_prompts(template_name, user_query,
config_base_path)` renders a stored template, or a file given as `@path`, and
returns the system prompt and the final query.

`rullm.commands.templates` prints and changes a store: `list_templates`,
`show_template`, `remove_template`, `create_template`, and `edit_template`,
which opens the file in `$EDITOR` (`nvim` if unset). `parse_default_kv` parses
a `key=value` default.

## Output

`rullm.output` writes to standard error according to an `OutputLevel`
(`NORMAL`, `QUIET`, `VERBOSE`): `heading`, `note`, `success`, `progress` and
`warning` are hidden at `QUIET`; `error` and `hint` are always shown. Colour is
off when `NO_COLOR` is set, when `TERM` is `dumb`, or when standard error is not
a terminal.

`rullm.commands.info.show_info(config_base_path, data_base_path, output_level)`
prints where the files are kept, whether `OPENAI_API_KEY`, `ANTHROPIC_API_KEY`
and `GOOGLE_AI_API_KEY` are set, and the version.

## Spinner

```python
from rullm.spinner import Spinner

with Spinner("Generating response"):
    ...
```

The spinner draws nothing when its stream is not a terminal;
`stop_and_replace(text)` then simply prints the text.

## Chat pieces

- `rullm.commands.chat.SlashCommand.parse(line)` recognises `/system <message>`,
  `/clear`, `/help`, `/quit`, `/exit` and `/edit`, and the bare words `quit`,
  `exit`, `help`, `clear` and `edit`; other `/` words parse as unknown, plain
  text as `None`.
- `handle_slash_command(command, conversation)` updates a list of
  `(ChatRole, text)` pairs in place and returns a `HandleCommandResult`
  (`NO_OP`, `QUIT`, or `EDIT` with text written in the editor).
- `rullm.commands.chat_completer.SlashCommandCompleter.complete(line, pos)`
  suggests slash commands for the word at the cursor.
- `rullm.commands.chat_prompt.ChatPrompt` gives the prompt and edit-mode
  indicator text.

## What the package does not do

There is no `rullm` command to run: the package has no command-line entry
point. It does not contact any LLM provider, so it sends no queries, runs no
interactive chat loop and fetches no model lists. It has no model alias
resolution or alias storage, no API key storage and no model cache handling;
the file names for these are defined, but nothing here reads or writes those
files.
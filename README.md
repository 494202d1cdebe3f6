# tmplgen

Building blocks for a tool that generates new projects from templates: case
conversion, template values, project and crate names, target directories and
the resolution of where a template comes from.

## Modules

- `tmplgen.casing`: splits text into words (at non-alphanumeric characters and
  case changes) and joins them again with `to_kebab_case`, `to_snake_case`,
  `to_shouty_kebab_case`, `to_shouty_snake_case`, `to_upper_camel_case`,
  `to_pascal_case`, `to_lower_camel_case` and `to_title_case`.
- `tmplgen.filters`: the same conversions as named filters. `filter_names()`
  lists them; `apply_filter(name, value)` applies one to a string, number or
  boolean. Unknown names, extra arguments and non-scalar values raise
  `FilterError`.
- `tmplgen.crate_type`: the `CrateType` enum (`bin` or `lib`) and
  `crate_type_for(lib)`.
- `tmplgen.user_input`: the `GitUserInput` and `UserParsedInput` dataclasses
  and the rules for turning a name into a template location:
  - `abbreviated_git_url_to_full_remote` expands `gh:`, `gl:` and `bb:`
    prefixes into GitHub, GitLab and Bitbucket URLs;
  - `abbreviated_github` maps `org/repo` to a GitHub URL;
  - `local_path` returns the path when it is an existing directory;
  - `resolve_template_location` tries those in that order and otherwise
    treats the name as a git URL, logging a warning that says which it chose
    (`location_message` builds its wording).
- `tmplgen.authors`: `get_authors()` finds the author name and e-mail from
  `CARGO_*`/`GIT_*` environment variables, then `git config`, then
  `USER`/`USERNAME`/`NAME` and `EMAIL`; it raises `AuthorError` when no name is
  found. `get_os_arch()` returns a tag such as `linux-x86_64`.
- `tmplgen.names`: `project_name_input` picks the raw name (a `project-name`
  template variable, the user's name, `CARGO_GENERATE_VALUE_PROJECT_NAME`, or
  a prompt unless silent, otherwise `ProjectNameError`); `project_name`
  kebab-cases it unless `force` is set; `crate_name` snake-cases it;
  `project_dir` gives the target directory and raises `ProjectDirError` if it
  already exists (unless `init` is set, when the destination itself is used).
- `tmplgen.template_values`: reads the `[values]` table of a TOML file,
  `key=value` definitions, the file named by
  `CARGO_GENERATE_TEMPLATE_VALUES_FILE` and `CARGO_GENERATE_VALUE_*`
  variables. Values given as arguments override those from the environment.
  Failures raise `TemplateValuesError`.

## Example

```python
from tmplgen.casing import to_kebab_case, to_snake_case
from tmplgen.user_input import abbreviated_git_url_to_full_remote
from tmplgen.template_values import read_template_values_from_definitions

to_kebab_case("some text")          # 'some-text'
to_snake_case("foobar-project")     # 'foobar_project'
abbreviated_git_url_to_full_remote("gh:foo/bar")
# 'https://github.com/foo/bar.git'
read_template_values_from_definitions(["my_key = 42"])
# {'my_key': '42'}
```

## What it does not do

This package has no command-line program and does not generate projects on
its own. It does not clone git repositories, render template files, run hook
scripts or copy files into the target directory; it only supplies the pieces
such a tool would use.

## Running the tests

```
pip install -e .[test]
pytest
```
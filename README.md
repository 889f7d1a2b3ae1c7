# philoshell

Two small console programs in one package:

- **philo**: a simulation of the dining philosophers problem, with one
  thread per philosopher and a monitor that watches for starvation.
- **minishell**: a minimal interactive shell in the spirit of bash, with
  quoting, `$VAR` and `$?` expansion, pipelines, redirections (`<`, `>`,
  `>>`), heredocs (`<<`) and a set of builtins.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## philo

```
philo n_philo t_die t_eat t_sleep [n_meals]
```

All arguments are positive whole numbers made of digits only. Times are in
milliseconds.

| Argument   | Meaning                                                        |
|------------|----------------------------------------------------------------|
| `n_philo`  | number of philosophers, and of forks on the table              |
| `t_die`    | how long a philosopher may go without starting a meal          |
| `t_eat`    | how long a meal takes                                          |
| `t_sleep`  | how long a philosopher sleeps after eating                     |
| `n_meals`  | optional; the simulation ends once everyone has eaten so often |

Each event is printed as one line: the milliseconds since the start, the
philosopher's number, and what happened (`is thinking`, `has taken a fork`,
`is eating`, `is_sleeping`).

```
$ philo 4 410 200 200 3
0 1 is thinking
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
...
```

If a philosopher goes longer than `t_die` without starting a meal, a line
ending in `died` is printed and the simulation stops. Without `n_meals` it
runs until someone dies; a single philosopher always dies, since there is
only one fork. A wrong number of arguments prints a usage line; a
non-numeric or non-positive argument prints an error naming it. In both
cases the exit status is 1.

From Python:

```python
import sys
from philoshell.philo.config import parse_args
from philoshell.philo.simulation import run

settings = parse_args(["5", "800", "200", "200", "7"])
table = run(settings, sys.stdout)
print([p.meals_eaten for p in table.philosophers])
```

`parse_args` takes the arguments after the program name and returns a
`Settings`; it raises `UsageError` or `InvalidArgumentError` for bad input.
`run` writes the log to the given stream and returns the final `Table`.

## minishell

```
minishell
```

This opens a `minishell$ ` prompt (with line editing where Python's
`readline` module is available). It supports:

- single quotes, which turn expansion off, and double quotes, which allow it
- `$NAME` expansion; unset names become the empty string and `$?` is the
  last exit status
- pipelines with `|`
- redirections `<`, `>` and `>>`, and heredocs with `<<`; if the delimiter
  is quoted, the heredoc body is not expanded
- the builtins `echo` (with `-n`), `cd`, `pwd`, `export`, `unset`, `env`
  and `exit`

`SHLVL` is increased by one at start-up. Unclosed quotes and misplaced
operators are reported as syntax errors with status 2, and the prompt
carries on. Ctrl-C abandons the current line (status 130) and Ctrl-D
leaves the shell.

The parts can also be used on their own:

```python
from philoshell.shell.lexer import lex_line
from philoshell.shell.parser import parse_tokens
from philoshell.shell.environment import Environment
from philoshell.shell.expander import expand_word

tokens = lex_line("echo \"$HOME\" | cat > out.txt")
tree = parse_tokens(tokens)

env = Environment.from_mapping({"HOME": "/home/user"})
print(expand_word("'$HOME' is \"$HOME\"", env, 0))  # $HOME is /home/user
```

`philoshell.shell.repl.run_line` runs a single line against a
`ShellContext` from `philoshell.shell.builtins` and returns its status.

### What minishell does not do

The shell runs only its builtins. It never starts other programs and has no
`PATH` lookup: any other command name is reported as `command not found`
with status 127. The two sides of a pipeline run one after the other inside
the shell, the left side's output held in memory; since no builtin reads
its input, a pipe or a `<` redirection only matters in that a missing input
file is reported as an error.
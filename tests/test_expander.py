from philoshell.shell.environment import Environment
from philoshell.shell.expander import expand_node, expand_word
from philoshell.shell.syntax_tree import Command, Pipeline, Redirection, RedirType


def _env(**values):
    return Environment.from_mapping(values)


def test_plain_variable_is_expanded():
    assert expand_word("$HOME", _env(HOME="/home/user")) == "/home/user"


def test_single_quotes_disable_expansion():
    assert expand_word("'$HOME'", _env(HOME="/home/user")) == "$HOME"


def test_double_quotes_allow_expansion():
    assert expand_word('"at $HOME now"', _env(HOME="/h")) == "at /h now"


def test_undefined_variable_becomes_empty():
    assert expand_word("x$NOPE.y", _env()) == "x.y"


def test_last_status_is_expanded():
    assert expand_word("$?", _env(), 42) == "42"


def test_dollar_without_name_is_literal():
    assert expand_word("a$", _env()) == "a$"


def test_name_consumes_longest_run():
    assert expand_word("$USER_x", _env(USER="me")) == ""


def test_mixed_quotes_are_removed():
    assert expand_word("\"it\"'s'", _env()) == "its"


def test_double_quote_inside_single_quotes_is_kept():
    assert expand_word("'say \"$X\"'", _env(X="1")) == 'say "$X"'


def test_expand_node_handles_pipeline_and_skips_heredoc():
    left = Command(["echo", "$A"], [Redirection(RedirType.OUT, "$F")])
    right = Command(["cat"], [Redirection(RedirType.HEREDOC, "'$A'")])
    tree = Pipeline(left, right)
    result = expand_node(tree, _env(A="one", F="out.txt"))
    assert result is tree
    assert left.argv == ["echo", "one"]
    assert left.redirs[0].target == "out.txt"
    assert right.redirs[0].target == "'$A'"


def test_expand_node_uses_last_status():
    command = Command(["echo", '"$?"'])
    expand_node(command, _env(), 7)
    assert command.argv == ["echo", "7"]
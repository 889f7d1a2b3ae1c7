import io

from philoshell.shell.builtins import ShellContext
from philoshell.shell.environment import Environment
from philoshell.shell.repl import main, run_line, run_loop
from philoshell.shell.text import syntax_error_message


def _ctx(**kwargs):
    return ShellContext(
        env=Environment(kwargs.pop("env", ())),
        stdout=io.StringIO(),
        stderr=io.StringIO(),
        **kwargs,
    )


def _reader(lines):
    it = iter(lines)
    return lambda prompt: next(it, None)


def test_run_line_runs_builtin():
    ctx = _ctx()
    assert run_line("echo hello", ctx) == 0
    assert ctx.stdout.getvalue() == "hello\n"


def test_blank_line_keeps_status():
    ctx = _ctx(last_status=5)
    assert run_line("   \t ", ctx) == 5
    assert ctx.last_status == 5
    assert ctx.stdout.getvalue() == ""


def test_unclosed_quote_is_syntax_error():
    ctx = _ctx()
    assert run_line("echo 'oops", ctx) == 2
    assert ctx.last_status == 2
    assert ctx.stdout.getvalue() == ""


def test_leading_pipe_is_syntax_error():
    ctx = _ctx()
    assert run_line("| echo", ctx) == 2
    assert syntax_error_message("|") in ctx.stderr.getvalue()


def test_variables_are_expanded():
    ctx = _ctx(env=[("A", "world")])
    run_line('echo "$A" \'$A\'', ctx)
    assert ctx.stdout.getvalue() == "world $A\n"


def test_last_status_is_expanded():
    ctx = _ctx()
    assert run_line("nope", ctx) == 127
    run_line("echo $?", ctx)
    assert ctx.stdout.getvalue() == "127\n"


def test_heredoc_lines_are_consumed():
    ctx = _ctx()
    reader = _reader(["body", "EOF", "after"])
    assert run_line("echo hi << EOF", ctx, reader) == 0
    assert ctx.stdout.getvalue() == "hi\n"
    assert reader("> ") == "after"


def test_loop_stops_at_exit():
    ctx = _ctx()
    status = run_loop(ctx, _reader(["echo a", "exit 3", "echo b"]))
    assert status == 3
    assert ctx.should_exit is True
    assert ctx.stdout.getvalue() == "a\n"


def test_loop_returns_last_status_at_end_of_input():
    ctx = _ctx()
    assert run_loop(ctx, _reader(["echo a", "nope"])) == 127
    assert ctx.stdout.getvalue() == "a\n"


def test_interactive_end_of_input_prints_exit():
    ctx = _ctx(interactive=True)
    run_loop(ctx, _reader([]))
    assert ctx.stdout.getvalue() == "exit\n"


def test_interrupt_while_reading_sets_status():
    ctx = _ctx()
    calls = []

    def reader(prompt):
        calls.append(prompt)
        if len(calls) == 1:
            raise KeyboardInterrupt
        return None

    assert run_loop(ctx, reader) == 130
    assert len(calls) == 2


def test_main_reads_standard_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("echo hi\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.endswith("hi\n")


def test_main_exit_status(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("exit 7\necho never\n"))
    assert main([]) == 7
"""A minimal bash-like shell: lexer, parser, expander, heredocs, builtins and executor."""
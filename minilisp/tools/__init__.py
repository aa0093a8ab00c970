"""Command-line tools: show, repl, tokens, nodes, generate, deriv, ebnfgen, uletters and utf8string."""
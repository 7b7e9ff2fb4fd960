"""Classic algorithms and data structures in plain Python: sorting, searching,
text, number theory, backtracking, lists, trees, containers, graphs, a maze,
tic-tac-toe and password-based AES-GCM."""

__version__ = "0.1.0"
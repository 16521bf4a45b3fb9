"""
Pure algorithms with no file or command line dependencies.

Modules:
    cliques            - Maximal clique enumeration (Bron-Kerbosch with pivoting)
    clique_statistics  - Clique number, clique counts and per-node statistics
"""

"""
Network analysis on the adjacency-list graph:
- weakly connected components
- PageRank by power iteration
- deterministic ranking of nodes by score
- the text report.
"""

"""Domain layer — the DAG store and its failure vocabulary.

This layer depends only on stdlib and networkx.
It must never import from codecs, services, commands, or config.
"""

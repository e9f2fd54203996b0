"""attoscaffold -- scaffolds the attoLLM starter project.

Generates a fixed ``src/``-layout skeleton for a tiny GPT-style language
model repository and, optionally, a ready-to-use virtual environment.
"""

__version__ = "0.1.0"

# model_store.py - saves and loads trained chains as JSON
#
# On disk a chain looks like:
#   {"start_tokens": {"a": 2},
#    "bigrams": {"a": {"banana": 2, "chair": 1}, "chair": {"<END>": 1}}}

import json
import os

from markov_walker.core.markov_chain import MarkovChain
from markov_walker.utils.logger_utils import Log

# Directory where trained chains are stored by default
DATA_DIRECTORY = "data"
MARKOV_PATH = os.path.join(DATA_DIRECTORY, "markov_chain.json")


def save_chain(chain: MarkovChain, path: str = MARKOV_PATH) -> str:
    """
    Save the chain to disk in JSON format.
    Args:
        chain (MarkovChain): the trained chain
        path (str): destination file, parent folders are created
    Returns:
        str: the path written
    """
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    state = chain.save_state()
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(state, f, indent=2, ensure_ascii=False)
    except OSError as e:
        Log.error(f"[model_store] save_chain failed for {path}: {e}")
        raise
    Log.write(f"[model_store] saved chain ({len(state['bigrams'])} tokens) to {path}")
    return path


def load_chain(path: str = MARKOV_PATH) -> MarkovChain:
    """
    Load a chain from disk.
    Returns:
        MarkovChain: the stored chain, or an empty one if the file is missing.
    Raises whatever made a present file unreadable (bad JSON, bad counts).
    """
    if not os.path.exists(path):
        Log.write(f"[model_store] no chain at {path}, starting empty")
        return MarkovChain()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        chain = MarkovChain.from_state(data)
    except (OSError, ValueError) as e:
        Log.error(f"[model_store] load_chain failed for {path}: {e}")
        raise
    Log.write(f"[model_store] loaded chain ({len(chain)} tokens) from {path}")
    return chain

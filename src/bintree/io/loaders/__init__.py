from .errors import LoaderError
from .tree_loader import dump_tree, load_tree

__all__ = ["load_tree", "dump_tree", "LoaderError"]

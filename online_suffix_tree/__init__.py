'''Initialize online_suffix_tree, exposing the suffix tree and batch processing classes.'''

from .suffix_tree import SuffixTree
from .repeat_processor import RepeatProcessor
from .python_backend.online_suffix import OnlineSuffixTree, TreeInvariantError

__all__ = [
    'SuffixTree',
    'RepeatProcessor',
    'OnlineSuffixTree',
    'TreeInvariantError'
]

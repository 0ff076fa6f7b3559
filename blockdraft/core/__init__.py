from .normalizer import normalize
from .blocks import check_block, is_block_draftable
from .pipeline import draft, draft_block

import pytest

from wordladder.config import Settings
from wordladder.dictionary import WordIndex
from wordladder.graph import GraphCache
from wordladder.managers.game import GameManager

WORDS = [
    'cat', 'cot', 'cog', 'dog', 'bat', 'xyz',
    'CART', 'card', 'ward', 'word',
    'abcdefghij',  # ten letters, never indexed
]

@pytest.fixture
def index():
    return WordIndex.build(WORDS)

@pytest.fixture
def graphs(index):
    return GraphCache(index)

@pytest.fixture
async def manager():
    # long tick so tests control when ticks happen; teardown runs on the test's loop
    mgr = GameManager(WORDS, settings=Settings(tick_interval=60))
    yield mgr
    for game_id in list(mgr.games):
        mgr.discard(game_id)

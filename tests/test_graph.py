import itertools
import threading

from wordladder import graph as graph_mod
from wordladder.dictionary import WordIndex
from wordladder.graph import GraphCache, build_graph, is_adjacent, is_reachable

def test_is_adjacent_examples():
    assert is_adjacent('cat', 'cot')
    assert not is_adjacent('cat', 'dog')
    assert not is_adjacent('cat', 'cats')
    assert not is_adjacent('cats', 'cat')
    assert not is_adjacent('cat', 'cat')
    assert is_adjacent('CAT', 'cot')
    assert not is_adjacent('', '')

def test_is_adjacent_symmetric():
    words = ['cat', 'cot', 'cog', 'dog', 'bat', 'tac', 'act']
    for a, b in itertools.product(words, repeat=2):
        assert is_adjacent(a, b) == is_adjacent(b, a)

def test_build_graph_matches_pairwise():
    words = ['cat', 'cot', 'cog', 'dog', 'bat', 'xyz', 'cab', 'tab']
    g = build_graph(words)
    assert set(g) == set(words)
    for a, b in itertools.combinations(words, 2):
        assert (b in g[a]) == is_adjacent(a, b)
        assert (b in g[a]) == (a in g[b])
    assert g['xyz'] == set()

def test_build_graph_words_with_underscores():
    words = ['p_', '_q', 'pq', '_a_', 'a__', '__a']
    g = build_graph(words)
    for a, b in itertools.combinations(words, 2):
        assert (b in g[a]) == is_adjacent(a, b)
    assert g['p_'] == {'pq'}
    assert '_q' not in g['p_']

def test_underscore_words_not_linked_by_cache():
    graphs = GraphCache(WordIndex.build(['p_', '_q']))
    assert not graphs.is_possible('p_', '_q')
    assert not graphs.adjacent('p_', '_q')

def test_build_graph_lowercases_and_dedupes():
    g = build_graph(['Cat', 'cat', 'COT'])
    assert g == {'cat': {'cot'}, 'cot': {'cat'}}

def test_is_reachable():
    g = build_graph(['cat', 'cot', 'cog', 'dog', 'xyz'])
    assert is_reachable(g, 'cat', 'dog')
    assert is_reachable(g, 'dog', 'cat')
    assert not is_reachable(g, 'cat', 'xyz')
    assert not is_reachable(g, 'cut', 'cat')

def test_graph_built_lazily_and_cached(graphs):
    assert graphs.cached_lengths() == []
    g = graphs.graph_for(3)
    assert graphs.cached_lengths() == [3]
    assert graphs.graph_for(3) is g
    assert g['cot'] == {'cat', 'cog'}

def test_graph_for_length_without_words(graphs):
    assert graphs.graph_for(7) == {}

def test_adjacent_same_with_and_without_cache(graphs):
    words = ['cat', 'cot', 'cog', 'dog', 'bat', 'cut', 'CAT', 'cats']
    before = {(a, b): graphs.adjacent(a, b) for a in words for b in words}
    graphs.graph_for(3)
    graphs.graph_for(4)
    after = {(a, b): graphs.adjacent(a, b) for a in words for b in words}
    assert before == after
    for a, b in before:
        assert before[(a, b)] == before[(b, a)]
    # not in the dictionary, still one letter apart
    assert graphs.adjacent('cat', 'cut')

def test_is_possible_game(graphs):
    assert graphs.is_possible('cat', 'dog')
    assert graphs.is_possible('CAT', 'Dog')
    assert graphs.is_possible('cat', 'bat')
    assert not graphs.is_possible('cat', 'xyz')
    assert not graphs.is_possible('cat', 'cart')
    assert graphs.is_possible('cart', 'word')
    assert graphs.cached_lengths() == [3, 4]

def test_is_possible_different_lengths_builds_nothing(graphs):
    assert not graphs.is_possible('cat', 'ward')
    assert graphs.cached_lengths() == []

def test_is_possible_start_not_in_dictionary(graphs):
    assert not graphs.is_possible('cut', 'cat')

def test_reachability_sound(graphs):
    # every reachable word sits on a chain of adjacent dictionary words
    g = graphs.graph_for(3)
    for start in g:
        for end in g:
            if not graphs.is_possible(start, end):
                continue
            frontier, seen = [start], {start}
            while frontier:
                w = frontier.pop()
                for n in g[w]:
                    assert graphs.adjacent(w, n)
                    assert graphs.index.contains(n)
                    if n not in seen:
                        seen.add(n)
                        frontier.append(n)
            assert end in seen

def test_graph_built_once_under_concurrency(graphs, monkeypatch):
    calls = []
    real = graph_mod.build_graph

    def counting(words):
        calls.append(1)
        return real(words)

    monkeypatch.setattr(graph_mod, 'build_graph', counting)
    threads = [threading.Thread(target=graphs.graph_for, args=(3,)) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(calls) == 1

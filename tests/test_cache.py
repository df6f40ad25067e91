from softwrap.wrap import WrapCache, WrapSegment


def make_cache(lines, width: int = 20, wrapper=None) -> WrapCache:
    if wrapper is None:
        return WrapCache(lines, width)
    return WrapCache(lines, width, wrapper=wrapper)


def test_get_segments_populates_on_miss_and_reuses_on_hit(counting_wrapper) -> None:
    cache = make_cache(["alpha beta"], wrapper=counting_wrapper)

    first = cache.get_segments(0)
    second = cache.get_segments(0)

    assert first is second
    assert len(counting_wrapper.calls) == 1
    assert cache.stats().hits == 1
    assert cache.stats().misses == 1


def test_out_of_range_index_returns_synthetic_empty_segment() -> None:
    cache = make_cache(["a", "b", "c"])

    assert cache.get_segments(5) == (WrapSegment("", 5, True),)
    assert cache.get_segments(-1) == (WrapSegment("", -1, True),)
    assert len(cache) == 0


def test_invalidate_line_reflects_new_text() -> None:
    lines = ["alpha beta"]
    cache = make_cache(lines)
    assert cache.get_segments(0)[0].text == "alpha beta"

    lines[0] = "gamma"
    cache.invalidate_line(0)

    assert [s.text for s in cache.get_segments(0)] == ["gamma"]


def test_invalidate_line_removes_exactly_one_entry() -> None:
    cache = make_cache(["Line 1", "Line 2", "Line 3"])
    for index in range(3):
        cache.get_segments(index)

    cache.invalidate_line(1)

    assert len(cache) == 2
    assert 1 not in cache
    assert 0 in cache and 2 in cache


def test_invalidate_line_ignores_uncached_index() -> None:
    cache = make_cache(["a", "b"])
    cache.get_segments(0)

    cache.invalidate_line(1)
    cache.invalidate_line(99)

    assert len(cache) == 1


def test_invalidate_from_recomputes_shifted_lines_only(counting_wrapper) -> None:
    lines = [f"line {i}" for i in range(10)]
    cache = make_cache(lines, wrapper=counting_wrapper)
    before = [cache.get_segments(i) for i in range(10)]
    counting_wrapper.reset()

    lines.insert(5, "inserted")
    cache.invalidate_from(5)
    after = [cache.get_segments(i) for i in range(11)]

    assert len(counting_wrapper.calls) == 6
    for index in range(5):
        assert after[index] is before[index]
    assert after[5][0].text == "inserted"
    assert after[6][0].text == "line 5"
    assert after[6][0].source_line == 6


def test_invalidate_from_after_removal() -> None:
    lines = ["zero", "one", "two", "three"]
    cache = make_cache(lines)
    for index in range(4):
        cache.get_segments(index)

    del lines[1]
    cache.invalidate_from(1)

    assert len(cache) == 1
    assert [cache.get_segments(i)[0].text for i in range(3)] == ["zero", "two", "three"]
    assert cache.get_segments(3) == (WrapSegment("", 3, True),)


def test_invalidate_all_clears_everything() -> None:
    cache = make_cache(["Line 1", "Line 2", "Line 3"])
    for index in range(3):
        cache.get_segments(index)

    cache.invalidate_all()

    assert len(cache) == 0


def test_set_width_flushes_only_on_change(counting_wrapper) -> None:
    lines = ["the quick brown fox jumps over the lazy dog"]
    cache = make_cache(lines, wrapper=counting_wrapper)
    assert len(cache.get_segments(0)) == 3

    assert cache.set_width(20) is False
    assert len(cache) == 1

    assert cache.set_width(40) is True
    assert len(cache) == 0
    assert len(cache.get_segments(0)) == 2
    assert counting_wrapper.calls[-1] == (lines[0], 40)


def test_width_is_floored_to_one() -> None:
    cache = make_cache(["abc"], width=0)

    assert cache.width == 1
    assert [s.text for s in cache.get_segments(0)] == ["a", "b", "c"]


def test_rebind_switches_sequence_and_clears() -> None:
    cache = make_cache(["old"])
    cache.get_segments(0)

    cache.rebind(["new", "lines"])

    assert len(cache) == 0
    assert cache.get_segments(1)[0].text == "lines"
    assert cache.line_count() == 2

from furysim.popularity import ItemPopularity


def test_sorting_by_counter():
    items = [ItemPopularity("a", 3), ItemPopularity("b", 1), ItemPopularity("c", 2)]
    assert [i.name for i in sorted(items)] == ["b", "c", "a"]


def test_equality_by_counter():
    assert ItemPopularity("a", 4) == ItemPopularity("b", 4)
    assert not ItemPopularity("a", 4) == ItemPopularity("a", 5)


def test_less_than_string_compares_name():
    item = ItemPopularity("axe", 100)
    assert item < "sword"
    assert not item < "anvil"


def test_matches_name():
    item = ItemPopularity("dragonmaw", 2)
    assert item.matches("dragonmaw")
    assert not item.matches("dragonstrike")


def test_default_counter_is_zero():
    item = ItemPopularity("blade")
    assert item.counter == 0
    assert item == ItemPopularity("other")
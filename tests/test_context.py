import itertools

from conftest import make_blog, make_event, make_leader, make_project, make_report
from club_assistant.search.context import EXCERPT_LIMIT, excerpt, serialize
from club_assistant.search.types import EntityKind

FACTORIES = {
    EntityKind.BLOGS: make_blog,
    EntityKind.EVENTS: make_event,
    EntityKind.PROJECTS: make_project,
    EntityKind.LEADERS: make_leader,
    EntityKind.REPORTS: make_report,
}


def test_every_section_present_with_matching_count():
    kinds = list(EntityKind)
    for counts in itertools.product((0, 1, 3), repeat=len(kinds)):
        items = {k: [FACTORIES[k](i) for i in range(n)] for k, n in zip(kinds, counts)}
        block = serialize(items)
        rendered = block.render()

        assert [s.kind for s in block.sections] == kinds
        for kind, n in zip(kinds, counts):
            section = block.section(kind)
            assert section.count == n
            title = kind.value.upper()
            if n:
                assert rendered.count(f"{title} ({n} found)") == 1
            else:
                assert f"{title}\nNo {kind.value} found in database." in rendered
        assert block.total == sum(counts)
        assert rendered.endswith(f"TOTAL ITEMS FOUND: {sum(counts)}")


def test_missing_kind_rendered_as_empty():
    block = serialize({EntityKind.BLOGS: [make_blog()]})
    rendered = block.render()
    assert "BLOGS (1 found)" in rendered
    assert "EVENTS\nNo events found in database." in rendered
    assert "REPORTS\nNo reports found in database." in rendered


def test_excerpt_bounded():
    for n in (0, 1, 199, 200, 201, 5000):
        text, cut = excerpt("a" * n)
        body = text[: -len("...")] if cut else text
        assert len(body) <= EXCERPT_LIMIT
        assert cut == (n > EXCERPT_LIMIT)


def test_long_content_sets_truncated_flag():
    block = serialize({EntityKind.BLOGS: [make_blog(content="word " * 200)], EntityKind.EVENTS: [make_event()]})
    assert block.section(EntityKind.BLOGS).truncated is True
    assert block.section(EntityKind.EVENTS).truncated is False
    assert "..." in block.section(EntityKind.BLOGS).text


def test_leader_line_format():
    block = serialize({EntityKind.LEADERS: [make_leader(1)]})
    assert "- Leader 1 - Secretary (2024/2025)" in block.render()

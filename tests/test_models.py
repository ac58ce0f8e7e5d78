"""Tests for entity models and patch semantics."""

from content_admin.models import CategoryPatch, NewsArticlePatch, Post, PostPatch


def test_patch_changes_only_supplied_fields():
    patch = PostPatch(title="New title")
    assert patch.changes() == {"title": "New title"}


def test_patch_accepts_camel_case_keys():
    patch = PostPatch.model_validate(
        {"categoryId": "cat-2", "downloadFiles": [{"name": "a", "url": "u", "size": 1}]}
    )

    changes = patch.changes()
    assert changes["category_id"] == "cat-2"
    assert changes["download_files"][0].name == "a"


def test_patch_tri_state_for_lists():
    assert PostPatch().changes() == {}
    assert PostPatch(images=[]).changes() == {"images": []}
    assert PostPatch(images=None).changes() == {"images": []}


def test_patch_null_on_nullable_field():
    assert NewsArticlePatch(image=None).changes() == {"image": None}
    assert NewsArticlePatch().changes() == {}


def test_patch_null_on_required_field_is_dropped():
    assert CategoryPatch(name=None, slug="s").changes() == {"slug": "s"}


def test_post_serializes_with_camel_case():
    post = Post(
        id="p1",
        title="t",
        description="d",
        category_id="c1",
        price="5",
        download_files=[{"name": "f", "url": "u", "size": 3}],
    )

    data = post.model_dump(by_alias=True, mode="json")
    assert data["categoryId"] == "c1"
    assert data["downloadCount"] == "0"
    assert data["downloadFiles"] == [{"name": "f", "url": "u", "size": 3}]
    assert "createdAt" in data

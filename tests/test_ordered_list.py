"""Ordered list engine: moves, inserts, removal and lifecycle hooks."""

import pytest

from gallery_admin.errors import NotInList
from gallery_admin.models import Upload
from tests.conftest import (
    assert_dense,
    ids_in_order,
    make_gallery,
    make_uploads,
    positions_by_id,
)


def _ids(*uploads):
    return [u.id for u in uploads]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_reordering(db, upload_list, gallery, four_uploads):
    a, b, c, d = four_uploads
    assert await ids_in_order(db, gallery.id) == _ids(a, b, c, d)

    assert await upload_list.move_lower(b)
    assert await ids_in_order(db, gallery.id) == _ids(a, c, b, d)

    assert await upload_list.move_higher(b)
    assert await ids_in_order(db, gallery.id) == _ids(a, b, c, d)

    await upload_list.move_to_bottom(a)
    assert await ids_in_order(db, gallery.id) == _ids(b, c, d, a)

    await upload_list.move_to_top(a)
    assert await ids_in_order(db, gallery.id) == _ids(a, b, c, d)

    await upload_list.move_to_bottom(b)
    assert await ids_in_order(db, gallery.id) == _ids(a, c, d, b)

    await upload_list.move_to_top(d)
    assert await ids_in_order(db, gallery.id) == _ids(d, a, c, b)

    assert_dense((await positions_by_id(db, gallery.id)).values())


@pytest.mark.unit
@pytest.mark.asyncio
async def test_move_to_bottom_with_next_to_last_item(db, upload_list, gallery, four_uploads):
    a, b, c, d = four_uploads
    await upload_list.move_to_bottom(c)
    assert await ids_in_order(db, gallery.id) == _ids(a, b, d, c)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_move_lower_and_move_higher_are_inverses(db, upload_list, gallery, four_uploads):
    a, b, c, d = four_uploads
    assert await upload_list.move_lower(b)
    assert await upload_list.move_higher(b)
    assert await ids_in_order(db, gallery.id) == _ids(a, b, c, d)

    assert await upload_list.move_lower(c)
    assert await upload_list.move_higher(d)
    assert await ids_in_order(db, gallery.id) == _ids(a, b, d, c)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_moves_past_the_ends_are_noops(db, upload_list, gallery, four_uploads):
    a, b, c, d = four_uploads
    assert await upload_list.move_higher(a) is False
    assert await upload_list.move_lower(d) is False
    assert await ids_in_order(db, gallery.id) == _ids(a, b, c, d)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_next_prev(upload_list, four_uploads):
    a, b, c, d = four_uploads
    assert (await upload_list.lower_item(a)).id == b.id
    assert await upload_list.higher_item(a) is None
    assert (await upload_list.higher_item(d)).id == c.id
    assert await upload_list.lower_item(d) is None


@pytest.mark.unit
@pytest.mark.asyncio
async def test_insert(db, upload_list):
    first_gallery = await make_gallery(db, "twenty")

    new = await upload_list.on_create(Upload(gallery_id=first_gallery.id))
    assert new.position == 1
    assert upload_list.is_first(new)
    assert await upload_list.is_last(new)

    new = await upload_list.on_create(Upload(gallery_id=first_gallery.id))
    assert new.position == 2
    assert not upload_list.is_first(new)
    assert await upload_list.is_last(new)

    new = await upload_list.on_create(Upload(gallery_id=first_gallery.id))
    assert new.position == 3
    assert not upload_list.is_first(new)
    assert await upload_list.is_last(new)

    other_gallery = await make_gallery(db, "zero")
    new = await upload_list.on_create(Upload(gallery_id=other_gallery.id))
    assert new.position == 1
    assert upload_list.is_first(new)
    assert await upload_list.is_last(new)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_insert_at(db, upload_list, gallery):
    new = await upload_list.on_create(Upload(gallery_id=gallery.id))
    assert new.position == 1

    new = await upload_list.on_create(Upload(gallery_id=gallery.id))
    assert new.position == 2

    new = await upload_list.on_create(Upload(gallery_id=gallery.id))
    assert new.position == 3

    new4 = await upload_list.on_create(Upload(gallery_id=gallery.id))
    assert new4.position == 4

    await upload_list.insert_at(new4, 3)
    assert new4.position == 3

    await db.refresh(new)
    assert new.position == 4

    await upload_list.insert_at(new, 2)
    assert new.position == 2

    await db.refresh(new4)
    assert new4.position == 4

    new5 = await upload_list.on_create(Upload(gallery_id=gallery.id))
    assert new5.position == 5

    await upload_list.insert_at(new5, 1)
    assert new5.position == 1

    await db.refresh(new4)
    assert new4.position == 5

    assert_dense((await positions_by_id(db, gallery.id)).values())


@pytest.mark.unit
@pytest.mark.asyncio
async def test_insert_at_clamps_to_bottom(db, upload_list, gallery, four_uploads):
    a, b, c, d = four_uploads
    assert await upload_list.insert_at(a, 50) == 4
    assert await ids_in_order(db, gallery.id) == _ids(b, c, d, a)
    assert_dense((await positions_by_id(db, gallery.id)).values())


@pytest.mark.unit
@pytest.mark.asyncio
async def test_insert_at_rejects_positions_below_one(upload_list, four_uploads):
    with pytest.raises(ValueError):
        await upload_list.insert_at(four_uploads[0], 0)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_insert_at_puts_unlisted_item_back(db, upload_list, gallery, four_uploads):
    a, b, c, d = four_uploads
    await upload_list.remove_from_list(c)
    await upload_list.insert_at(c, 1)
    assert await ids_in_order(db, gallery.id) == _ids(c, a, b, d)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_delete_middle(db, upload_list, gallery, four_uploads):
    a, b, c, d = four_uploads

    await upload_list.on_destroy(b)

    assert await ids_in_order(db, gallery.id) == _ids(a, c, d)
    assert await positions_by_id(db, gallery.id) == {a.id: 1, c.id: 2, d.id: 3}

    await upload_list.on_destroy(a)

    assert await ids_in_order(db, gallery.id) == _ids(c, d)
    assert await positions_by_id(db, gallery.id) == {c.id: 1, d.id: 2}


@pytest.mark.unit
@pytest.mark.asyncio
async def test_nil_scope(db, upload_list):
    new1, new2, new3 = await make_uploads(upload_list, None, 3)
    await upload_list.move_higher(new2)
    assert await ids_in_order(db, None) == _ids(new2, new1, new3)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_remove_from_list_should_then_fail_in_list(upload_list, four_uploads):
    a = four_uploads[0]
    assert upload_list.in_list(a)
    assert await upload_list.remove_from_list(a)
    assert not upload_list.in_list(a)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_remove_from_list_should_set_position_to_nil(db, upload_list, gallery, four_uploads):
    a, b, c, d = four_uploads

    await upload_list.remove_from_list(b)

    assert await ids_in_order(db, gallery.id) == _ids(b, a, c, d)
    assert await positions_by_id(db, gallery.id) == {a.id: 1, b.id: None, c.id: 2, d.id: 3}


@pytest.mark.unit
@pytest.mark.asyncio
async def test_remove_before_destroy_does_not_shift_lower_items_twice(db, upload_list, gallery, four_uploads):
    a, b, c, d = four_uploads

    await upload_list.remove_from_list(b)
    assert await upload_list.remove_from_list(b) is False
    await upload_list.on_destroy(b)

    assert await ids_in_order(db, gallery.id) == _ids(a, c, d)
    assert await positions_by_id(db, gallery.id) == {a.id: 1, c.id: 2, d.id: 3}


@pytest.mark.unit
@pytest.mark.asyncio
async def test_moves_of_unlisted_item_are_noops(db, upload_list, gallery, four_uploads):
    a, b, c, d = four_uploads
    await upload_list.remove_from_list(b)

    assert await upload_list.move_lower(b) is False
    assert await upload_list.move_higher(b) is False
    assert await upload_list.move_to_top(b) is False
    assert await upload_list.move_to_bottom(b) is False
    assert await upload_list.higher_item(b) is None
    assert await upload_list.lower_item(b) is None
    assert not upload_list.is_first(b)
    assert not await upload_list.is_last(b)

    with pytest.raises(NotInList):
        upload_list.position_of(b)

    assert await positions_by_id(db, gallery.id) == {a.id: 1, b.id: None, c.id: 2, d.id: 3}


@pytest.mark.unit
@pytest.mark.asyncio
async def test_moving_to_bottom_on_single_item_list(db, upload_list):
    lonely = await make_gallery(db, "six")
    upload = await upload_list.on_create(Upload(gallery_id=lonely.id, position=1))

    assert await upload_list.move_to_bottom(upload)
    assert upload.position == 1
    assert await upload_list.move_to_bottom(upload)
    assert upload.position == 1


@pytest.mark.unit
@pytest.mark.asyncio
async def test_on_create_keeps_a_preset_position(db, upload_list, gallery, four_uploads):
    preset = await upload_list.on_create(Upload(gallery_id=gallery.id, position=2))

    positions = await positions_by_id(db, gallery.id)
    assert positions[preset.id] == 2
    # Nothing else was renumbered; callers wanting a slot use insert_at.
    assert [positions[u.id] for u in four_uploads] == [1, 2, 3, 4]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_bottom_helpers(upload_list, four_uploads):
    a, b, c, d = four_uploads
    assert await upload_list.bottom_position(a) == 4
    assert await upload_list.bottom_position(a, exclude=[d]) == 3
    assert (await upload_list.bottom_item(a)).id == d.id
    assert (await upload_list.bottom_item(a, exclude=[d])).id == c.id
    assert [u.id for u in await upload_list.items(a)] == _ids(a, b, c, d)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_bottom_of_empty_scope(db, upload_list):
    empty = await make_gallery(db, "empty")
    probe = Upload(gallery_id=empty.id)
    assert await upload_list.bottom_position(probe) == 0
    assert await upload_list.bottom_item(probe) is None


@pytest.mark.unit
@pytest.mark.asyncio
async def test_single_steps_leave_neighbours_alone(db, upload_list, gallery, four_uploads):
    a, b, c, d = four_uploads
    await upload_list.increment_position(a)
    assert await positions_by_id(db, gallery.id) == {a.id: 2, b.id: 2, c.id: 3, d.id: 4}

    await upload_list.decrement_position(a)
    assert await positions_by_id(db, gallery.id) == {a.id: 1, b.id: 2, c.id: 3, d.id: 4}


@pytest.mark.unit
@pytest.mark.asyncio
async def test_operations_never_cross_scopes(db, upload_list, gallery, four_uploads):
    other = await make_gallery(db, "other")
    others = await make_uploads(upload_list, other.id, 3)
    before = await positions_by_id(db, other.id)

    a, b, c, d = four_uploads
    await upload_list.move_to_top(d)
    await upload_list.move_lower(a)
    await upload_list.insert_at(b, 1)
    await upload_list.remove_from_list(c)
    await upload_list.on_destroy(a)
    await upload_list.reorder_by_ids([d.id, b.id])

    assert await positions_by_id(db, other.id) == before
    assert await ids_in_order(db, other.id) == _ids(*others)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_density_after_mixed_operations(db, upload_list, gallery):
    uploads = await make_uploads(upload_list, gallery.id, 7)

    await upload_list.move_to_bottom(uploads[0])
    await upload_list.insert_at(uploads[6], 2)
    await upload_list.on_destroy(uploads[3])
    await upload_list.move_higher(uploads[5])
    await upload_list.remove_from_list(uploads[1])
    await upload_list.move_to_top(uploads[4])
    uploads.append(await upload_list.on_create(Upload(gallery_id=gallery.id)))
    await upload_list.insert_at(uploads[1], 3)
    await upload_list.move_lower(uploads[2])

    positions = await positions_by_id(db, gallery.id)
    assert len(positions) == 7
    assert_dense(positions.values())
    assert all(p is not None for p in positions.values())

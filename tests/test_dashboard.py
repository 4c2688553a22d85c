from datetime import date

import pytest
from sqlmodel import SQLModel

from apparel_inventory.client.api import InventoryClient
from apparel_inventory.dashboard.materials import MaterialsBoard, LOAD_ERROR
from apparel_inventory.dashboard.orders import OrderQueue
from apparel_inventory.dashboard.sorting import SortCycle
from apparel_inventory.db.schema import OrderStatus
from apparel_inventory.models.material import MaterialCreate
from apparel_inventory.models.order import OrderCreate


@pytest.fixture
def api(client):
    return InventoryClient(client)


@pytest.fixture
def board(api):
    for name, quantity, tags in [
        ("rose Hoodie", 3, ["Bright", "Floral Designs"]),
        ("Black Tee", 40, ["Blanks", "Dark"]),
        ("Oat Crewneck", 0, ["Neutral"]),
    ]:
        api.create_material(MaterialCreate(
            name=name, color="x", size="M", quantity=quantity, pack_size=6, tags=tags))

    board = MaterialsBoard(api)
    board.load()
    return board


@pytest.fixture
def queue(api):
    for sender, delivery in [
        ("Mills", "2025-01-05T23:00:00"),
        ("acme", "2025-01-01T00:00:00"),
        ("Zed Co", "2025-02-01T09:00:00"),
    ]:
        api.create_order(OrderCreate(
            order_from=sender, contact_info=f"{sender.lower()}@example.com",
            description="Blank tees", quantity=1, scheduled_delivery=delivery))

    queue = OrderQueue(api)
    queue.load()
    return queue


def test_sort_cycle_rotates_back_to_none():
    cycle = SortCycle(["name", "quantity"])

    assert [cycle.toggle() for _ in range(4)] == ["name", "quantity", None, "name"]


def test_board_loads_rows(board):
    assert board.error is None
    assert board.loading is False
    assert len(board.visible()) == 3


def test_board_search_is_case_insensitive(board):
    board.search_term = "HOOD"

    assert [m.name for m in board.visible()] == ["rose Hoodie"]


def test_board_tag_filter_matches_any_selected_tag(board):
    board.toggle_tag("Dark")
    board.toggle_tag("Neutral")

    assert {m.name for m in board.visible()} == {"Black Tee", "Oat Crewneck"}
    assert board.tag_filter_label() == "2 Categories"

    board.toggle_tag("Dark")
    assert board.tag_filter_label() == "Neutral"

    board.clear_tags()
    assert board.tag_filter_label() == "All Categories"


def test_board_sort_by_name_then_quantity(board):
    board.sort.toggle()
    assert [m.name for m in board.visible()] == ["Black Tee", "Oat Crewneck", "rose Hoodie"]

    board.sort.toggle()
    assert [m.quantity for m in board.visible()] == [40, 3, 0]

    board.sort.toggle()
    assert [m.name for m in board.visible()] == ["rose Hoodie", "Black Tee", "Oat Crewneck"]


def test_board_low_stock(board):
    assert {m.name for m in board.low_stock()} == {"rose Hoodie", "Oat Crewneck"}


def test_stepper_applies_the_server_row(board):
    tee = next(m for m in board.materials if m.name == "Black Tee")

    updated = board.step(tee.id, -1)

    local = next(m for m in board.materials if m.id == tee.id)
    assert updated.quantity == 39
    assert local == updated
    assert local.updated_at > tee.updated_at


def test_stepper_on_an_unloaded_material_raises_key_error(board):
    missing = max(m.id for m in board.materials) + 1

    with pytest.raises(KeyError):
        board.step(missing, 1)


def test_stepper_clamps_at_zero_without_calling_the_server(board):
    empty = next(m for m in board.materials if m.name == "Oat Crewneck")

    assert board.step(empty.id, -1) is None
    assert next(m for m in board.materials if m.id == empty.id) == empty


def test_board_known_tags(board):
    assert board.known_tags() == ["Blanks", "Bright", "Dark", "Floral Designs", "Neutral"]


def test_board_load_failure_sets_error(board, engine):
    SQLModel.metadata.drop_all(engine)

    board.load()

    assert board.error == LOAD_ERROR
    assert board.loading is False


def test_queue_search_covers_sender_contact_and_description(queue):
    queue.search_term = "ZED"
    assert [o.order_from for o in queue.visible()] == ["Zed Co"]

    queue.search_term = "mills@"
    assert [o.order_from for o in queue.visible()] == ["Mills"]

    queue.search_term = "blank"
    assert len(queue.visible()) == 3


def test_queue_date_range_is_inclusive_of_whole_days(queue):
    queue.start_date = date(2025, 1, 1)
    queue.end_date = date(2025, 1, 5)

    assert {o.order_from for o in queue.visible()} == {"Mills", "acme"}


def test_queue_sort_cycle(queue):
    queue.sort.toggle()
    assert [o.order_from for o in queue.visible()] == ["Mills", "acme", "Zed Co"]

    queue.sort.toggle()
    assert [o.order_from for o in queue.visible()] == ["acme", "Mills", "Zed Co"]

    queue.sort.toggle()
    assert [o.order_from for o in queue.visible()] == ["acme", "Mills", "Zed Co"]

    assert queue.sort.toggle() is None


def test_queue_status_update_and_filter(queue):
    first = queue.orders[0]

    updated = queue.update_status(first.id, OrderStatus.SHIPPED)
    queue.selected_statuses = [OrderStatus.SHIPPED]

    assert queue.visible() == [updated]


def test_queue_cancel_removes_locally(queue):
    first = queue.orders[0]

    queue.cancel(first.id)

    assert first.id not in [o.id for o in queue.orders]
    assert len(queue.orders) == 2


def test_queue_cancel_failure_reloads(queue, engine):
    SQLModel.metadata.drop_all(engine)

    queue.cancel(queue.orders[0].id)

    assert queue.error is not None


def test_queue_load_leaves_out_cancelled_orders(queue, api):
    cancelled = queue.orders[1]
    api.update_order_status(cancelled.id, OrderStatus.CANCELLED)

    queue.load()

    assert cancelled.id not in [o.id for o in queue.orders]
    assert [o.order_from for o in queue.orders] == ["Mills", "Zed Co"]
    assert len(api.fetch_orders()) == 3


def test_queue_date_range_uses_utc_days(api, queue):
    api.create_order(OrderCreate(
        order_from="Late Co", contact_info="late@example.com", description="Blank tees",
        quantity=1, scheduled_delivery="2025-01-06T01:00:00+02:00"))
    queue.load()
    queue.start_date = date(2025, 1, 5)
    queue.end_date = date(2025, 1, 5)

    assert {o.order_from for o in queue.visible()} == {"Mills", "Late Co"}

from virtual_catalog_api.app.services.item_synthesizer import render_text, synthesize
from virtual_catalog_api.app.services.selection_store import SelectionStore


class TestItemSynthesizer:

    def test_id_and_text_derived_from_id(self):
        item = synthesize(42, set())

        assert item.id == 42
        assert item.text == render_text(42) == "Item 42"
        assert item.selected is False

    def test_selected_read_live_from_selection(self):
        store = SelectionStore(100)
        store.set_selected(7, True)

        assert synthesize(7, store).selected is True
        assert synthesize(8, store).selected is False

        store.set_selected(7, False)
        assert synthesize(7, store).selected is False

    def test_repeated_calls_are_identical(self):
        selection = {3}
        assert synthesize(3, selection) == synthesize(3, selection)

from itsm_catalog.models.schema import RelationDefinition
from itsm_catalog.services import relations

SINGLE = RelationDefinition(name="parent_service", label="Servicio Padre", target="services")
MULTI = RelationDefinition(name="linked_cis", label="CIs", target="components", multiple=True)

TARGETS = [
    {"id": "a", "name": "Alpha"},
    {"id": "b", "category": "Redes"},
    {"id": "c"},
]


def test_single_build_preselects_stored_id():
    options = relations.build_options(SINGLE, TARGETS, "b")
    assert [o.value for o in options] == ["", "a", "b", "c"]
    assert [o.value for o in options if o.selected] == ["b"]
    assert [o.label for o in options] == ["-- Seleccionar --", "Alpha", "Redes", "Unnamed"]


def test_single_build_without_match_selects_sentinel():
    for saved in (None, "", "borrado"):
        options = relations.build_options(SINGLE, TARGETS, saved)
        assert [o.value for o in options if o.selected] == [""]


def test_multi_build_preselects_every_stored_id():
    options = relations.build_options(MULTI, TARGETS, ["c", "a", "borrado"])
    assert [o.value for o in options] == ["a", "b", "c"]
    assert [o.value for o in options if o.selected] == ["a", "c"]
    assert not any(o.selected for o in relations.build_options(MULTI, TARGETS, None))


def test_collect_single():
    assert relations.collect_value(SINGLE, "a") == "a"
    assert relations.collect_value(SINGLE, "") == ""
    assert relations.collect_value(SINGLE, None) == ""
    assert relations.collect_value(SINGLE, ["b"]) == "b"


def test_collect_multi_keeps_order():
    assert relations.collect_value(MULTI, ["y", "x"]) == ["y", "x"]
    assert relations.collect_value(MULTI, []) == []
    assert relations.collect_value(MULTI, None) == []
    assert relations.collect_value(MULTI, "x") == ["x"]


def test_resolve_reports_dangling_ids():
    refs = relations.resolve(["a", "borrado"], TARGETS)
    assert [r.id for r in refs] == ["a", "borrado"]
    assert refs[0].resolved and refs[0].record["name"] == "Alpha"
    assert not refs[1].resolved
    assert relations.resolve("", TARGETS) == []


def test_targets_without_id_are_skipped():
    targets = [{"name": "Legacy"}, {"id": "a", "name": "Alpha"}, {"id": 7, "name": 42}]
    single = relations.build_options(SINGLE, targets, "7")
    assert [(o.value, o.label) for o in single] == [("", "-- Seleccionar --"), ("a", "Alpha"), ("7", "42")]
    assert [o.value for o in single if o.selected] == ["7"]
    multi = relations.build_options(MULTI, targets, ["a"])
    assert [o.value for o in multi if o.selected] == ["a"]


def test_form_after_import_of_records_without_id(app):
    """Un registro importado sin id no rompe el formulario de las relaciones."""
    assert app.store.import_whole_state('{"services": [{"name": "Legacy"}]}') is True
    form = {f.name: f for f in app.catalog.form("components")}
    assert [o.value for o in form["parent_service"].relation_options] == [""]

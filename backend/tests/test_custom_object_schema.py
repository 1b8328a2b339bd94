from __future__ import annotations

from hubspot_practicum.schemas.custom_object import (
    CustomObjectCreate,
    CustomObjectForm,
    CustomObjectProperties,
    CustomObjectRecord,
)


def test_form_defaults_missing_fields_to_empty_string() -> None:
    props = CustomObjectForm().to_properties()
    assert props.model_dump() == {"name": "", "bio": "", "species": ""}


def test_form_maps_category_when_species_missing() -> None:
    props = CustomObjectForm(name="Rex", bio="A dog", category="Canine").to_properties()
    assert props.species == "Canine"


def test_form_prefers_species_over_category() -> None:
    props = CustomObjectForm(species="Cat", category="Feline").to_properties()
    assert props.species == "Cat"


def test_form_blank_species_falls_back_to_category() -> None:
    props = CustomObjectForm(species="", category="Feline").to_properties()
    assert props.species == "Feline"


def test_properties_treat_null_as_empty() -> None:
    props = CustomObjectProperties.model_validate({"name": "Nemo", "bio": None, "species": None})
    assert props.bio == ""
    assert props.species == ""


def test_record_ignores_extra_hubspot_fields() -> None:
    record = CustomObjectRecord.model_validate(
        {
            "id": "12",
            "properties": {"name": "Rex", "hs_object_id": "12"},
            "archived": False,
        }
    )
    assert record.id == "12"
    assert record.properties.model_dump() == {"name": "Rex", "bio": "", "species": ""}


def test_create_payload_shape() -> None:
    payload = CustomObjectCreate(properties=CustomObjectProperties(name="Rex"))
    assert payload.model_dump() == {"properties": {"name": "Rex", "bio": "", "species": ""}}


def test_properties_coerce_scalars_to_text() -> None:
    props = CustomObjectProperties.model_validate({"name": 5, "bio": 1.5, "species": False})
    assert props.model_dump() == {"name": "5", "bio": "1.5", "species": "False"}

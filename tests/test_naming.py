"""Tests for the naming module."""

from restdsl_generator.naming import (
    DirectRouteNamer,
    default_class_name,
    is_valid_class_name,
    is_valid_package_name,
)


class TestDirectRouteNamer:
    """Test destination names for operations."""

    def test_operation_id(self):
        namer = DirectRouteNamer()
        assert namer({"operationId": "listPets"}) == "direct:listPets"

    def test_synthesized_names_count_from_one(self):
        namer = DirectRouteNamer()
        assert [namer({}) for _ in range(3)] == ["direct:rest1", "direct:rest2", "direct:rest3"]

    def test_empty_operation_id_is_synthesized(self):
        namer = DirectRouteNamer()
        assert namer({"operationId": ""}) == "direct:rest1"

    def test_operation_id_does_not_consume_counter(self):
        namer = DirectRouteNamer()
        names = [namer({}), namer({"operationId": "a"}), namer({}), namer({"operationId": "b"})]
        assert names == ["direct:rest1", "direct:a", "direct:rest2", "direct:b"]

    def test_counter_is_per_instance(self):
        first = DirectRouteNamer()
        first({})
        first({})
        assert DirectRouteNamer()({}) == "direct:rest1"

    def test_duplicate_operation_ids_are_kept(self):
        namer = DirectRouteNamer()
        assert namer({"operationId": "x"}) == namer({"operationId": "x"}) == "direct:x"


class TestClassName:
    """Test class names derived from the API title."""

    def test_title_with_spaces(self):
        assert default_class_name("Swagger Petstore") == "SwaggerPetstoreRestDslRoutes"

    def test_leading_digits_and_punctuation(self):
        assert default_class_name("3D Store API (v2)") == "DStoreAPIv2RestDslRoutes"

    def test_missing_title(self):
        assert default_class_name(None) == "RestDslRoutes"
        assert default_class_name("") == "RestDslRoutes"

    def test_non_ascii_removed(self):
        assert default_class_name("Café API") == "CafAPIRestDslRoutes"

    def test_valid_identifier(self):
        """Derived names must always be valid class names."""
        for title in ("Swagger Petstore", "123", "--", "Ünïcode", "a-b.c"):
            assert is_valid_class_name(default_class_name(title))

    def test_non_string_title(self):
        """YAML may load a title such as 2024 as an int."""
        assert default_class_name(2024) == "RestDslRoutes"
        assert default_class_name(3.5) == "RestDslRoutes"
        assert default_class_name(True) == "TrueRestDslRoutes"


class TestValidation:
    def test_class_names(self):
        assert is_valid_class_name("PetRoutes")
        assert not is_valid_class_name("class")
        assert not is_valid_class_name("Pet Routes")
        assert not is_valid_class_name("Réseau")

    def test_package_names(self):
        assert is_valid_package_name("rest_dsl_generated")
        assert is_valid_package_name("petstore.routes")
        assert not is_valid_package_name("petstore..routes")
        assert not is_valid_package_name("1petstore")
        assert not is_valid_package_name("petstore.import")

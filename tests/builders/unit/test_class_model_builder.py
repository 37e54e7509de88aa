"""Class model builder tests."""

from __future__ import annotations

import pytest
from wsdl_codegen.core.builders import ClassModelBuilder
from wsdl_codegen.core.classmap import ClassmapRegistry
from wsdl_codegen.core.config import CompilerConfig
from wsdl_codegen.core.descriptors import DescriptorKind, Visibility
from wsdl_codegen.core.errors import DuplicateMappingError
from wsdl_codegen.core.schema import (
    ComplexType,
    Element,
    Operation,
    QName,
    Restriction,
    SchemaSet,
    Service,
    SimpleType,
    xsd,
)
from wsdl_codegen.core.target import TargetLanguage
from wsdl_codegen.languages.php import PHP_TARGET
from wsdl_codegen.languages.python import PYTHON_TARGET

SHOP_NS = "urn:shop"
CRM_NS = "urn:crm"


def _enum_type(name: str, values: tuple[str, ...], base: QName | None = None) -> SimpleType:
    restriction = Restriction(base or xsd("string"))
    for value in values:
        restriction.add_check("enumeration", value, doc=f"{value.lower()} value")
    return SimpleType(QName(SHOP_NS, name), restriction, doc=f"{name} enumeration")


def _order_type(namespace: str = SHOP_NS) -> ComplexType:
    return ComplexType(
        QName(namespace, "Order"),
        [
            Element("id", xsd("int")),
            Element("total", xsd("decimal"), nillable=True),
        ],
    )


def _builder(
    *types,
    language: TargetLanguage = PYTHON_TARGET,
    classmap: ClassmapRegistry | None = None,
    **options,
) -> ClassModelBuilder:
    schema_set = SchemaSet()
    for schema_type in types:
        schema_set.add_type(schema_type)
    options.setdefault("base_namespace", "Shop")
    options.setdefault("structured_namespaces", True)
    return ClassModelBuilder(CompilerConfig(**options), language, schema_set, classmap)


def test_build_enum_creates_one_constant_per_facet() -> None:
    color = _enum_type("Color", ("RED", "GREEN", "BLUE"))
    builder = _builder(color)

    descriptor = builder.build_enum(color)

    assert descriptor.kind is DescriptorKind.ENUM
    assert descriptor.name == "Color"
    assert descriptor.qualified_name == "Shop.Enum.Color"
    assert [c.name for c in descriptor.constants] == ["RED", "GREEN", "BLUE"]
    assert [c.value for c in descriptor.constants] == ["RED", "GREEN", "BLUE"]
    assert descriptor.constants[0].doc == "red value"
    assert descriptor.doc == "Color enumeration"
    assert descriptor.parent is None
    assert builder.classmap.lookup("{urn:shop}Color") == "Shop.Enum.Color"


def test_build_enum_sanitizes_names_but_keeps_values() -> None:
    size = _enum_type("Size", ("extra large", "class", "1x"))

    descriptor = _builder(size).build_enum(size)

    assert [c.name for c in descriptor.constants] == ["extra_large", "class_", "_1x_"]
    assert [c.value for c in descriptor.constants] == ["extra large", "class", "1x"]
    assert descriptor.get_constant("class_").value == "class"


def test_build_enum_uses_configured_base_type() -> None:
    color = _enum_type("Color", ("RED",))

    descriptor = _builder(color, enum_base_type="enum.Enum").build_enum(color)

    assert descriptor.parent == "enum.Enum"


def test_build_enum_extends_generated_base_enum() -> None:
    color = _enum_type("Color", ("RED", "GREEN"))
    warm = _enum_type("WarmColor", ("RED",), base=color.qname)

    descriptor = _builder(color, warm, enum_base_type="enum.Enum").build_enum(warm)

    assert descriptor.parent == "Shop.Enum.Color"


def test_build_dto_keeps_element_order_and_nullability() -> None:
    order = _order_type()
    builder = _builder(order)

    descriptor = builder.build_dto(order)

    assert descriptor.kind is DescriptorKind.DTO
    assert descriptor.qualified_name == "Shop.Type.Order"
    assert [(f.name, f.type.type_name, f.nullable) for f in descriptor.fields] == [
        ("id", "int", False),
        ("total", "float", True),
    ]
    assert descriptor.nullable_arguments == (False, True)
    assert descriptor.parent is None
    assert descriptor.imports == ()
    assert builder.classmap.lookup("{urn:shop}Order") == "Shop.Type.Order"


def test_build_dto_with_always_nullable_constructor_arguments() -> None:
    order = _order_type()

    descriptor = _builder(order, null_constructor_arguments=True).build_dto(order)

    assert descriptor.nullable_arguments == (True, True)


def test_build_dto_fields_keep_wire_names() -> None:
    shipment = ComplexType(
        QName(SHOP_NS, "Shipment"),
        [Element("tracking code", xsd("string")), Element("from", xsd("string"))],
    )

    descriptor = _builder(shipment).build_dto(shipment)

    assert [(f.name, f.wire_name) for f in descriptor.fields] == [
        ("tracking_code", "tracking code"),
        ("from_", "from"),
    ]


def test_build_dto_accessors_make_fields_protected() -> None:
    order = _order_type()

    descriptor = _builder(order, accessors=True).build_dto(order)

    assert descriptor.accessors is True
    assert {f.visibility for f in descriptor.fields} == {Visibility.PROTECTED}
    assert descriptor.get_field("total").getter_name == "getTotal"
    assert descriptor.get_field("total").setter_name == "setTotal"


def test_build_dto_parent_and_abstract_flag() -> None:
    entity = ComplexType(QName(SHOP_NS, "Entity"), [Element("id", xsd("int"))], abstract=True)
    order = ComplexType(QName(SHOP_NS, "Order"), [Element("total", xsd("decimal"))], parent=entity.qname)
    builder = _builder(entity, order)

    entity_descriptor = builder.build_dto(entity)
    order_descriptor = builder.build_dto(order)

    assert entity_descriptor.abstract is True
    assert order_descriptor.abstract is False
    assert order_descriptor.parent == "Shop.Type.Entity"


def test_build_dto_ignores_xsd_parent() -> None:
    order = ComplexType(QName(SHOP_NS, "Order"), [Element("id", xsd("int"))], parent=xsd("anyType"))

    assert _builder(order).build_dto(order).parent is None


def test_build_dto_collects_cross_namespace_imports() -> None:
    customer = ComplexType(QName(CRM_NS, "Customer"), [Element("name", xsd("string"))])
    order = ComplexType(
        QName(SHOP_NS, "Order"),
        [
            Element("buyer", customer.qname),
            Element("payer", customer.qname),
            Element("lines", QName(SHOP_NS, "ArrayOfOrderLine")),
        ],
    )
    line = ComplexType(QName(SHOP_NS, "OrderLine"), [Element("quantity", xsd("int"))])

    descriptor = _builder(customer, order, line, axis_namespaces=True).build_dto(order)

    assert descriptor.qualified_name == "Shop.shop.Type.Order"
    assert descriptor.imports == ("Shop.crm.Type.Customer",)
    assert descriptor.get_field("lines").type.declaration == "list[Shop.shop.Type.OrderLine]"


def test_build_service_maps_operations_to_methods() -> None:
    service = Service(
        "ShopService",
        SHOP_NS,
        [Operation("getOrder", QName(SHOP_NS, "GetOrderRequest"), QName(SHOP_NS, "GetOrderResponse"))],
        doc="Order lookup",
    )

    descriptor = _builder(classmap_name="shop.classmap").build_service(service)

    assert descriptor.kind is DescriptorKind.SERVICE
    assert descriptor.qualified_name == "Shop.ShopService"
    assert descriptor.classmap_name == "shop.classmap"
    assert descriptor.doc == "Order lookup"
    method = descriptor.get_method("getOrder")
    assert method.wire_name == "getOrder"
    assert method.parameter_name == "parameters"
    assert method.parameter_type.qualified_name == "Shop.Message.GetOrderRequest"
    assert method.return_type.qualified_name == "Shop.Message.GetOrderResponse"


def test_build_service_resolves_known_message_types() -> None:
    request = ComplexType(QName(SHOP_NS, "GetOrderRequest"), [Element("id", xsd("int"))])
    service = Service(
        "ShopService",
        SHOP_NS,
        [Operation("getOrder", request.qname, xsd("string"))],
    )

    method = _builder(request).build_service(service).methods[0]

    assert method.parameter_type.qualified_name == "Shop.Type.GetOrderRequest"
    assert method.return_type.is_primitive is True
    assert method.return_type.type_name == "str"


def test_build_service_sanitizes_names_and_keeps_wire_name() -> None:
    service = Service(
        "Shop Service",
        SHOP_NS,
        [Operation("list", QName(SHOP_NS, "ListRequest"), QName(SHOP_NS, "ListResponse"))],
    )

    descriptor = _builder(
        language=PHP_TARGET,
        base_namespace="Shop",
        service_base_type="\\SoapClient",
    ).build_service(service)

    assert descriptor.name == "Shop_Service"
    assert descriptor.parent == "\\SoapClient"
    assert descriptor.qualified_name == "Shop\\Shop_Service"
    assert descriptor.methods[0].name == "list_"
    assert descriptor.methods[0].wire_name == "list"


def test_colliding_generated_names_fail() -> None:
    first = _order_type("urn:ns1")
    second = _order_type("urn:ns2")
    builder = _builder(first, second)

    builder.build_dto(first)
    with pytest.raises(DuplicateMappingError) as excinfo:
        builder.build_dto(second)

    assert excinfo.value.generated_name == "Shop.Type.Order"
    assert excinfo.value.existing_schema_name == "{urn:ns1}Order"
    assert excinfo.value.schema_name == "{urn:ns2}Order"


def test_builders_share_the_given_classmap() -> None:
    classmap = ClassmapRegistry()
    order = _order_type()
    color = _enum_type("Color", ("RED",))
    builder = _builder(order, color, classmap=classmap)

    builder.build_enum(color)
    builder.build_dto(order)

    assert list(classmap.finalize().items()) == [
        ("{urn:shop}Color", "Shop.Enum.Color"),
        ("{urn:shop}Order", "Shop.Type.Order"),
    ]


def test_service_may_share_its_schema_name_with_a_type() -> None:
    order = _order_type()
    builder = _builder(order)

    builder.build_dto(order)
    service = builder.build_service(Service("Order", SHOP_NS))

    assert service.qualified_name == "Shop.Order"
    assert builder.classmap.lookup("{urn:shop}Order") == "Shop.Type.Order"
    assert builder.classmap.lookup_service("{urn:shop}Order") == "Shop.Order"


def test_service_cannot_take_a_type_class_name() -> None:
    order = _order_type()
    builder = _builder(order, structured_namespaces=False)

    builder.build_dto(order)
    with pytest.raises(DuplicateMappingError) as excinfo:
        builder.build_service(Service("Order", SHOP_NS))

    assert excinfo.value.generated_name == "Shop.Order"
    assert excinfo.value.existing_schema_name == "{urn:shop}Order"
    assert excinfo.value.schema_name == "service:{urn:shop}Order"

from falco.declarations import (
    AclCidr,
    AclDeclaration,
    BackendDeclaration,
    BackendProbeObject,
    BackendProperty,
    DirectorBackendObject,
    DirectorDeclaration,
    DirectorProperty,
    PenaltyboxDeclaration,
    RatecounterDeclaration,
    SubroutineDeclaration,
    TableDeclaration,
    TableProperty,
)
from falco.expressions import IP, Boolean, Ident, Integer, String
from falco.meta import Comments, Meta
from falco.statements import BlockStatement, EsiStatement

C = "// This is comment"
A = "# This is another comment"
B = "/* This is comment */"


def meta(nest=0, leading=(), trailing=(), infix=()):
    return Meta(
        nest=nest,
        leading=Comments(leading),
        trailing=Comments(trailing),
        infix=Comments(infix),
    )


def test_acl_declaration():
    acl = AclDeclaration(
        meta=meta(0, [C], [C]),
        name=Ident(value="internal"),
        cidrs=[
            AclCidr(
                meta=meta(1, [C, A], [C]),
                inverse=Boolean(value=True),
                ip=IP(value="192.168.0.1"),
                mask=Integer(value=32),
            ),
            AclCidr(
                meta=meta(1, [C, A], [C]),
                inverse=Boolean(value=False),
                ip=IP(value="192.168.0.2"),
            ),
        ],
    )
    expect = """// This is comment
acl internal {
  // This is comment
  # This is another comment
  !"192.168.0.1"/32; // This is comment
  // This is comment
  # This is another comment
  "192.168.0.2"; // This is comment
} // This is comment
"""
    assert str(acl) == expect


def test_acl_with_infix_comment_and_no_inverse():
    acl = AclDeclaration(
        meta=meta(0, infix=[C]),
        name=Ident(value="office"),
        cidrs=[AclCidr(meta=meta(1), ip=IP(value="10.0.0.0"), mask=Integer(value=8))],
    )
    assert str(acl) == 'acl office {\n  "10.0.0.0"/8;\n// This is comment\n}\n'


def test_backend_declaration():
    backend = BackendDeclaration(
        meta=meta(0, [C], [C]),
        name=Ident(value="example"),
        properties=[
            BackendProperty(
                meta=meta(1, [C, A], [C]),
                key=Ident(value="host"),
                value=String(value="example.com"),
            ),
            BackendProperty(
                meta=meta(1, [C, A], [C]),
                key=Ident(value="probe"),
                value=BackendProbeObject(
                    meta=meta(1, [C, A], [C]),
                    values=[
                        BackendProperty(
                            meta=meta(2, [C, A], [C]),
                            key=Ident(value="request"),
                            value=String(value="GET / HTTP/1.1"),
                        )
                    ],
                ),
            ),
        ],
    )
    expect = """// This is comment
backend example {
  // This is comment
  # This is another comment
  .host = "example.com"; // This is comment
  // This is comment
  # This is another comment
  .probe = {
    // This is comment
    # This is another comment
    .request = "GET / HTTP/1.1"; // This is comment
  } // This is comment
} // This is comment
"""
    assert str(backend) == expect


def test_backend_property_plain_value_ends_with_semicolon():
    prop = BackendProperty(
        meta=meta(1), key=Ident(value="port"), value=String(value="443")
    )
    assert str(prop) == '  .port = "443";'


def test_director_declaration():
    director = DirectorDeclaration(
        meta=meta(0, [C], [C]),
        name=Ident(value="example"),
        director_type=Ident(value="client"),
        properties=[
            DirectorProperty(
                meta=meta(1, [C, A], [C]),
                key=Ident(value="quorum"),
                value=String(value="20%"),
            ),
            DirectorBackendObject(
                meta=meta(1, [C, A], [C]),
                values=[
                    DirectorProperty(
                        meta=meta(1, [C, A], [C]),
                        key=Ident(value="request"),
                        value=String(value="GET / HTTP/1.1"),
                    ),
                    DirectorProperty(
                        meta=meta(1, [C, A], [C]),
                        key=Ident(value="weight"),
                        value=Integer(value=1),
                    ),
                ],
            ),
        ],
    )
    expect = """// This is comment
director example client {
  // This is comment
  # This is another comment
  .quorum = "20%"; // This is comment
  // This is comment
  # This is another comment
  { .request = "GET / HTTP/1.1"; .weight = 1; } // This is comment
} // This is comment
"""
    assert str(director) == expect


def test_director_without_type():
    director = DirectorDeclaration(name=Ident(value="d"))
    assert str(director) == "director d {\n}\n"


def test_table_declaration():
    table = TableDeclaration(
        meta=meta(0, [C], [C]),
        name=Ident(value="example"),
        value_type=Ident(value="STRING"),
        properties=[
            TableProperty(
                meta=meta(1, [C, A], [C]),
                key=String(value="foo"),
                value=String(value="bar"),
            )
        ],
    )
    expect = """// This is comment
table example STRING {
  // This is comment
  # This is another comment
  "foo": "bar", // This is comment
} // This is comment
"""
    assert str(table) == expect


def test_table_without_value_type():
    table = TableDeclaration(
        name=Ident(value="t"),
        properties=[TableProperty(meta=meta(1), key=String(value="k"), value=String(value="v"))],
    )
    assert str(table) == 'table t {\n  "k": "v",\n}\n'


def test_penaltybox_declaration():
    p = PenaltyboxDeclaration(
        meta=meta(0, [C], [B]),
        name=Ident(value="ip_pbox"),
        block=BlockStatement(meta=meta(0, [B])),
    )
    expect = """// This is comment
penaltybox ip_pbox {
} /* This is comment */
"""
    assert str(p) == expect


def test_ratecounter_declaration():
    r = RatecounterDeclaration(
        meta=meta(0, [C], [B]),
        name=Ident(value="requests_rate"),
        block=BlockStatement(meta=meta(0, [B])),
    )
    expect = """// This is comment
ratecounter requests_rate {
} /* This is comment */
"""
    assert str(r) == expect


def test_subroutine_declaration():
    sub = SubroutineDeclaration(
        meta=meta(0, [C], [B]),
        name=Ident(value="vcl_recv"),
        block=BlockStatement(
            meta=meta(0, [C], [B]),
            statements=[EsiStatement(meta=meta(1, [C], [B]))],
        ),
    )
    expect = """// This is comment
sub vcl_recv {
  // This is comment
  esi; /* This is comment */
} /* This is comment */
"""
    assert str(sub) == expect


def test_subroutine_return_type_not_rendered():
    sub = SubroutineDeclaration(
        name=Ident(value="f"),
        block=BlockStatement(),
        return_type=Ident(value="STRING"),
    )
    assert str(sub) == "sub f {\n}\n"
    assert sub.return_type.value == "STRING"
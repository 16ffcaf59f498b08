# falco

Building blocks for working with Fastly VCL from Python: a syntax tree that
renders back to VCL source with its comments kept in place, resolvers that
supply VCL from files or from a Terraform plan, and a runner for external
transformer programs.

## Modules

### `falco.meta`

- `Token` holds a token's type, literal, line, position, offset and file.
- `Comment` is one comment. `Comments` is a list of comments. Plain strings
  passed to it are wrapped in `Comment`. `Comments.annotations()` returns the
  text after `@` on every comment line that starts with `@` once leading
  spaces, `*`, `/` and `#` are stripped. For example, `// @recv` gives `recv`.
- `Meta` carries a node's `token`, `nest` level and its `leading`, `trailing`
  and `infix` comments. It renders them with `leading_comment()`,
  `leading_inline_comment()`, `trailing_comment()` and `infix_comment()`.
- `Node` is the base of every node. Each node has a `meta` field, the
  `nest` and `token` properties, and the same four comment methods.
- `Operator` is an operator such as `=` or `+=`.
- `indent(level)` returns two spaces per nesting level.

### `falco.expressions`

`Ident`, `IP`, `Boolean`, `Integer`, `String`, `Float`, `RTime`,
`GroupedExpression`, `InfixExpression`, `PrefixExpression`, `IfExpression` and
`FunctionCallExpression`.

A `String` whose token offset is 4 renders as a bracketed string, `{"..."}`.
Infix and prefix expressions render wrapped in parentheses.

### `falco.statements`

`AddStatement`, `BlockStatement`, `CallStatement`, `DeclareStatement`,
`ErrorStatement`, `EsiStatement`, `FunctionCallStatement`,
`GotoDestinationStatement`, `GotoStatement`, `IfStatement` (with `else if`
branches in `another`, and `alternative` / `alternative_comments` for the
`else` branch), `ImportStatement`, `IncludeStatement`, `LogStatement`,
`RemoveStatement`, `RestartStatement`, `ReturnStatement`, `SetStatement`,
`SyntheticBase64Statement`, `SyntheticStatement`, `UnsetStatement`, and `VCL`.
`VCL` is the root of a program and renders its statements in order.

### `falco.declarations`

`AclDeclaration` with `AclCidr` entries, `BackendDeclaration` with
`BackendProperty` and `BackendProbeObject`, `DirectorDeclaration` with
`DirectorProperty` and `DirectorBackendObject`, `TableDeclaration` with
`TableProperty`, `PenaltyboxDeclaration`, `RatecounterDeclaration` and
`SubroutineDeclaration`.

Calling `str()` on any node renders its VCL source.

### `falco.resolver`

- `new_file_resolvers(main, include_paths)` checks that `main` exists. It
  returns a list holding one `FileResolver`. That resolver searches the given
  include paths in order and then the main file's directory, with every path
  made absolute.
- `FileResolver.main_vcl()` reads the main file. `FileResolver.resolve(module)`
  finds a module in the search paths, adding `.vcl` when the extension is
  missing. Both return a `VclFile` (`name`, `data`).
- `new_stdin_resolvers(stream, timeout)` reads a Terraform plan from `stream`.
  The stream defaults to standard input and the timeout to 10 seconds. It
  returns one `StdinResolver` per Fastly service. Each resolver holds the
  service's main VCL and its modules, and its `name` is the service name.
  `StdinResolver.resolve(module)` looks a module up by its exact name.
- Every failure raises `ResolverError`: an empty or missing input file, a
  module that cannot be found, a service with no main VCL, or a read error or
  timeout on the stream.

### `falco.terraform`

- `parse_terraform_planned_input(data)` takes the JSON from
  `terraform show -json` for a saved plan. It returns a `FastlyService`
  (`name`, `vcls`) for each `fastly_service_vcl` or `fastly_service_v1`
  resource of the `registry.terraform.io/fastly/fastly` provider. Resources in
  the root module come first, then those in child modules. Each VCL is a
  `TerraformVcl` (`name`, `content`, `main`).
- `is_fastly_vcl_service_resource(resource)` tells whether a planned resource
  is such a service.
- `TerraformInputError` is raised when the input is not valid JSON, when
  `planned_values` or `root_module` is missing, and when the plan holds no
  Fastly service.

### `falco.transform`

- `new_transformer(name)` finds the executable `falco-transform-<name>` on
  `PATH`. It raises `TransformerNotFoundError` if there is none.
- `Transformer.execute(data, output)` runs the command with `data` on its
  standard input. The command's standard output and error go to `output`,
  which defaults to `sys.stderr`, each line prefixed with `[<command>] `. A
  non-zero exit raises `subprocess.CalledProcessError`.

## Example

```python
from falco.expressions import Ident, String
from falco.meta import Comment, Comments, Meta, Operator, Token
from falco.statements import SetStatement

stmt = SetStatement(
    meta=Meta(Token(), 0, Comments([Comment("// set the host")])),
    ident=Ident(meta=Meta(Token(), 0), value="req.http.Host"),
    operator=Operator(operator="="),
    value=String(meta=Meta(Token(), 0), value="example.com"),
)
print(stmt, end="")
# // set the host
# set req.http.Host = "example.com";
```

## What this package does not do

The package has no lexer, parser or linter. It does not read VCL text into a
syntax tree, and it does not check VCL for errors. Trees are built by
constructing the node classes directly. It has no command-line program, and it
does not talk to the Fastly API.

## Running the tests

Install the package with its `test` extra, then run `pytest` from the project
root.
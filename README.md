# inetlisp

An interpreter for a small interaction-net language written in Lisp syntax.
A program declares node types with principal ports (marked `!`), rules that
fire when nodes meet on their principal ports, and expressions that build
nets. The worker then reduces the net until no more rules apply, and prints
what is left on the value stack.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Usage

Run one or more source files, in order:

```
inet-lisp-st run program.lisp
```

Each top-level expression is evaluated and its results are printed: plain
values as they are, wires as the net they are connected to. If a program
fails (an undefined name, a failed `assert`, a file that cannot be read), the
error is written to standard error and the command exits with status 1.

Print information about the host system (page size, number of processors):

```
inet-lisp-st info
```

Show the version or the list of commands:

```
inet-lisp-st version
inet-lisp-st --version
inet-lisp-st --help
```

## The language

```lisp
(define-node zero value!)
(define-node add1 prev value!)
(define-node add target! addend result)

(define-rule (add (zero) addend result)
  (connect addend result))

(define-rule (add (add1 prev) addend result)
  (add1 (add prev addend) result))

(define (two) (add1 (add1 (zero))))

(add (two) (two))
```

Statements:

- `(define-node <name> <port> ...)` declares a node type. A port whose name
  ends with `!` is principal.
- `(define-rule <pattern> <exp> ...)` declares a rule. Nested patterns are
  flattened into several node patterns joined by fresh principal names.
- `(define-rule* (<pattern> ...) <exp> ...)` declares a rule over a net of
  several node patterns.
- `(define <name> <exp>)` defines a value; `(define (<name> <arg> ...) <exp> ...)`
  defines a function.
- `(import <name> ... "<path>")` imports names from another file, relative to
  the importing file. Each file is loaded once per loader.
- `(= <name> ... <exp>)` (or `assign`) binds the results of an expression to
  local names. Local variables are linear: each is used exactly once.
- Any other expression is evaluated, the net is reduced, and the results are
  printed.

Integers are wrapped to 61 bits; `idiv` and `imod` round toward zero. Floats
keep all but the lowest three bits of their encoding.

The prelude provides booleans (`true`, `false`, `not`, `and`, `or`), `eq?`,
`assert`, integer operations (`int?`, `iadd`, `isub`, `imul`, `idiv`, `imod`,
`int-to-float`, `int-dup`), float operations (`float?`, `fadd`, `fsub`,
`fmul`, `fdiv`, `fmod`, `float-to-int`, `float-dup`), the net operations
`connect` and `link`, and `fn-dup`. Prelude operations applied to wires
become nodes that fire once their principal ports hold values.

## Library use

```python
import io

from inetlisp.lang.execute import Loader

output = io.StringIO()
loader = Loader(output=output)
mod = loader.load("program.lisp")
print(output.getvalue())   # what the top-level expressions printed
print(mod)                 # the values the file defined
```

The pieces can also be used on their own: `inetlisp.lang.parse.parse_sexps`
and `parse_stmt_list` read source text, `inetlisp.lang.compile.compile_exp`
turns expressions into opcodes of an `inetlisp.core.function.Function`, and
`inetlisp.core.worker.Worker` runs frames (`run_until`) and reduces the net
(`work`).

Errors in a program (undefined names, failed assertions, reusing a linear
variable, wrong arity) raise `inetlisp.value.InetError`; syntax errors raise
`inetlisp.lang.parse.ParseError`, a subclass of it.

## What it does not do

There is no graphical viewer for stepping through a reduction. A `Worker`
created with `track_nodes=True` keeps the set of live nodes in
`player_nodes`, which a viewer could draw, but the package ships none, and
the command line offers no option to turn it on. There is no interactive
prompt either: programs are run from files.
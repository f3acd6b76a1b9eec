# Core type aliases for the mal data model.
# Integers and strings are plain Python int/str. Everything that needs its own
# tag (symbols, keywords, nil, true/false, lists, vectors, maps, closures) is a
# small class under mal.types.
#
# Naming guidance:
# - MalForm:  Use in reader code to denote syntactic forms (code-as-data).
# - MalValue: Use in evaluator/runtime code to denote evaluated values.
# Both resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
MalValue = Any
# Forms and values share one representation
MalForm = MalValue

# Evaluator function type handed to special forms
EvaluatorFn = Callable[..., MalValue]

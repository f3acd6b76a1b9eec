# Definitions evaluated into every fresh Interpreter after the core primitives.
PRELUDE = """
(def! not (fn* (a) (if a false true)))
"""

"""Entry format specification.

The two JSON Schemas (tooth and alias entries) and the structural
validator that checks raw entry documents against them.
"""

FORMAT_VERSION = 1

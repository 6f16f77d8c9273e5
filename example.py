#!/usr/bin/env python3
"""
Example usage of the JSON Linter.

This script runs a few documents through the formatter and shows the
pretty-printed output, the individual pipeline stages and the error
reporting for malformed input.
"""

import logging
from json_linter import JSONFormatter


def main():
    """Main example function."""
    print("JSON Linter Example")
    print("=" * 50)

    compact = (
        '{"Image":{"Width":800,"Height":600,"Title":"View from 15th Floor",'
        '"Thumbnail":{"Url":"http://www.example.com/image/481989943","Height":125,"Width":100},'
        '"Animated":false,"IDs":[116,943,234,38793]}}'
    )
    print(f"Original JSON ({len(compact)} characters):\n{compact}\n")

    formatter = JSONFormatter(default_indent_width=4, enable_profiling=True)

    # Pretty-print
    result = formatter.format(compact)
    if result.success:
        print("✅ Formatted:")
        print(result.output)
    else:
        print(f"❌ Error: {result.error}")

    print()
    print(formatter.profiler.export_metrics("summary"))

    # The stages on their own
    tokens = formatter.tokenize('[1, "two", null]')
    print(f"\nTokens: {[token.describe() for token in tokens]}")
    document = formatter.parse('[1, "two", null]')
    print(f"Document as Python: {document.to_python()}")
    print(f"Rendered at indent 2:\n{formatter.generate(document, 2)}")

    # Malformed input
    print("\nMalformed documents:")
    for bad in ['{"a":}', '"abc', '[1, 2,]', 'nul', '"\\u0041"']:
        result = formatter.format(bad)
        print(f"   {bad:<10} -> {result.error}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.CRITICAL)
    main()

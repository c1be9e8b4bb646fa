"""
jsonhealer demonstration script.
"""

import re

import jsonhealer

EMOJI_PATTERN = re.compile("[\U0001F600-\U0001F64F]")


def main():
    print("jsonhealer - JSON Repair Demo")
    print("=" * 40)

    examples = [
        ('{"name": "Alice", "age": 30', "Missing closing brace"),
        ('```json\n{"name": "Bob"}\n```', "Markdown code block"),
        ('Here\'s the data you requested:\n{"name": "Charlie", "age": 25}', "Mixed text"),
        ('{"name": "David", "age": 35,}', "Trailing comma"),
        ('{name: "Eve", age: 40}', "Unquoted keys"),
        ("{'name': 'Frank', 'active': True, 'manager': None}", "Python literals"),
        (
            """
        {
            server: {
                host: 'localhost',
                port: 8080, // default
                ssl: false,
            },
            features: ['auth' 'logging'],
        """,
            "Complex configuration",
        ),
    ]

    for i, (json_str, description) in enumerate(examples, 1):
        print(f"\n{i}. {description}")
        print(f"Input:  {json_str.strip()}")
        report = jsonhealer.heal_with_report(json_str)
        print(f"Output: {report.text}")
        print(f"Valid:  {report.valid} (resolved by {report.resolved_by})")

    # Custom transformations live on a healer instance
    healer = jsonhealer.JsonHealer()
    healer.register_transformation(
        "remove_emojis", lambda text: EMOJI_PATTERN.sub("", text), 0
    )
    emoji_example = '\U0001F600{"name": "Frank"}\U0001F600'
    print(f"\n{len(examples) + 1}. Custom transformation")
    print(f"Input:  {emoji_example}")
    print(f"Output: {healer.heal(emoji_example)}")


if __name__ == "__main__":
    main()

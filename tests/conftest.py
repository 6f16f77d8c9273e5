"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def flat_object_json():
    """Compact object with one member of each primitive kind."""
    return '{"elm1":123,"elm2":456,"elm3":"apple","elm4":false}'


@pytest.fixture
def flat_object_pretty():
    """Canonical form of flat_object_json at indent width 4."""
    return (
        '{\n'
        '    "elm1": 123,\n'
        '    "elm2": 456,\n'
        '    "elm3": "apple",\n'
        '    "elm4": false\n'
        '}'
    )


@pytest.fixture
def image_json():
    """The nested Image/Thumbnail/IDs sample."""
    return (
        '{"Image": {"Width": 800, "Height": 600, "Title": "View from 15th Floor", '
        '"Thumbnail": {"Url": "http://www.example.com/image/481989943", '
        '"Height": 125, "Width": 100}, "Animated": false, '
        '"IDs": [116, 943, 234, 38793]}}'
    )


@pytest.fixture
def image_pretty():
    """Canonical form of image_json at indent width 4."""
    return "\n".join([
        '{',
        '    "Image": {',
        '        "Width": 800,',
        '        "Height": 600,',
        '        "Title": "View from 15th Floor",',
        '        "Thumbnail": {',
        '            "Url": "http://www.example.com/image/481989943",',
        '            "Height": 125,',
        '            "Width": 100',
        '        },',
        '        "Animated": false,',
        '        "IDs": [',
        '            116,',
        '            943,',
        '            234,',
        '            38793',
        '        ]',
        '    }',
        '}',
    ])

#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fortune_app.config.loader import ConfigLoader
from fortune_app.config.validation import ConfigValidator, ValidationError
from fortune_app.errors import ConfigurationError


def validate_config_dir(config_dir: Optional[Path] = None) -> List[ValidationError]:
    """Validate the merged configuration for a config directory."""
    loader = ConfigLoader.create(config_dir)
    config = loader.merge_config()
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    print(f"🔍 Validating fortune configuration in {config_dir or project_root / 'config'}...")

    all_valid = True

    try:
        errors = validate_config_dir(config_dir)
        if errors:
            print(f"❌ Found {len(errors)} validation errors:")
            for error in errors:
                print(f"  • {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print("✅ fortune.yaml is valid")
    except ConfigurationError as e:
        print(f"❌ Error reading configuration: {e}")
        all_valid = False

    # Test call-level overrides
    print("\n📋 Testing call-level overrides...")
    test_overrides = {
        "seasonal": {"early_year_end_month": 4},
        "message": {"collapse_empty_fragments": True},
    }

    try:
        ConfigLoader.create(config_dir).load(test_overrides)
        print("✅ Override validation passed")
    except ConfigurationError as e:
        print("❌ Override validation failed:")
        for error in e.errors:
            print(f"  • {error.field}: {error.message}")
        all_valid = False

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()

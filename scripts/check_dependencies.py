"""
Check if all dependencies are installed correctly
"""

import sys


REQUIRED = {
    "fastapi": "FastAPI",
    "uvicorn": "Uvicorn",
    "pydantic": "Pydantic",
    "pydantic_settings": "Pydantic Settings",
    "dotenv": "python-dotenv",
    "httpx": "HTTPX",
}

OPTIONAL = {
    "pytest": "pytest",
    "pytest_asyncio": "pytest-asyncio",
}


def _missing(modules: dict) -> list:
    missing = []
    for module, name in modules.items():
        try:
            __import__(module)
            print(f"  [OK] {name}")
        except ImportError:
            print(f"  [MISSING] {name}")
            missing.append(name)
    return missing


def check_dependencies() -> bool:
    """Check required dependencies"""

    print("Checking dependencies...")
    print("=" * 50)

    print("\nRequired dependencies:")
    missing_required = _missing(REQUIRED)

    print("\nOptional dependencies (tests):")
    missing_optional = _missing(OPTIONAL)

    print("\n" + "=" * 50)

    if missing_required:
        print("\nMissing required dependencies:")
        for dep in missing_required:
            print(f"  - {dep}")
        print("\nInstall with: pip install -e .")
        return False

    if missing_optional:
        print("\nMissing optional dependencies:")
        for dep in missing_optional:
            print(f"  - {dep}")
        print("\nInstall with: pip install -e '.[test]'")

    print("\nAll required dependencies are installed!")
    return True


if __name__ == "__main__":
    success = check_dependencies()
    sys.exit(0 if success else 1)

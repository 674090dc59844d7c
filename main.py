"""Run the name resolver from a source checkout."""

from name_generator.resolve_names import main

if __name__ == "__main__":
    raise SystemExit(main())

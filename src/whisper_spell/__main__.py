"""Allow ``python -m whisper_spell`` to cast a spell."""

from whisper_spell.cli.cast import main

if __name__ == "__main__":
    main()

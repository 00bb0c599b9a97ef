"""Package entry point for ``python -m bilingual_srt``."""

from bilingual_srt.cli import main

if __name__ == "__main__":
    main()

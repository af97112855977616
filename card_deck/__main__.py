"""支持 python -m card_deck 运行命令行."""

from .cli import main

if __name__ == "__main__":
    main()

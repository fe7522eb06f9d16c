"""Точка входа в приложение."""
import sys

from image_resizer.app import ImageResizerApp
from image_resizer.config import ResizerConfig, configure_logging


def main() -> None:
    """Создаёт и запускает главное окно; путь к изображению можно передать аргументом."""
    config = ResizerConfig()
    configure_logging(config.log_level)
    app = ImageResizerApp(config)
    if len(sys.argv) > 1:
        app.after(0, app.controller.open_path, sys.argv[1])
    app.mainloop()


if __name__ == "__main__":
    main()

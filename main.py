"""
main.py — Bootstrap

1. Load settings
2. Start the session (level table, reports, character)
3. Create the window
4. Push the starting scene
5. Run
"""

from core import settings
from core.app import App
from core.session import Session
from scenes.reports_scene import ReportsScene


def main():
    settings.load()

    # A missing or broken level table stops here: there is no default.
    session = Session.start()
    print(f"[MAIN] Session ready: reports {session.reports_path}, "
          f"characters {session.characters_path}")

    app = App(
        session,
        title=settings.get("window", "title"),
        width=int(settings.get("window", "width")),
        height=int(settings.get("window", "height")),
        fps=int(settings.get("window", "fps")),
    )
    app.push_scene(ReportsScene())
    app.run()


if __name__ == "__main__":
    main()

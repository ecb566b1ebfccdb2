import subprocess
import sys
from pathlib import Path
import webbrowser
import threading
import time


ROOT = Path(__file__).resolve().parent
BACKEND_MAIN = ROOT / "SpaceRace_ETL" / "Backend" / "main.py"
BACKEND_API = ROOT / "SpaceRace_ETL" / "Backend" / "api.py"
FRONTEND_APP = ROOT / "SpaceRace_ETL" / "Frontend" / "app.py"
MODES = {"offline", "online", "api", "etl"}


def open_browser_delayed():
    """Open browser after Streamlit starts (5 second delay)"""
    time.sleep(5)
    if not webbrowser.open("http://localhost:8501"):
        print("Could not open a browser, visit http://localhost:8501")


def prompt_mode_gui() -> str:
    import tkinter as tk
    from tkinter import ttk

    choice = {"value": None}

    def set_and_close(val: str):
        choice["value"] = val
        root.destroy()

    root = tk.Tk()
    root.title("Space Race Launcher")
    root.geometry("360x190")
    root.resizable(False, False)

    frm = ttk.Frame(root, padding=16)
    frm.pack(fill="both", expand=True)

    title = ttk.Label(frm, text="Choose how to run:", font=("Segoe UI", 11, "bold"))
    title.pack(pady=(0, 12))

    btns = ttk.Frame(frm)
    btns.pack()

    ttk.Button(btns, text="Dashboard (Streamlit)", command=lambda: set_and_close("offline"), width=22).grid(row=0, column=0, padx=6, pady=6)
    ttk.Button(btns, text="API + Dashboard", command=lambda: set_and_close("online"), width=22).grid(row=0, column=1, padx=6, pady=6)
    ttk.Button(btns, text="API only", command=lambda: set_and_close("api"), width=22).grid(row=1, column=0, padx=6, pady=6)
    ttk.Button(btns, text="Export reports (ETL)", command=lambda: set_and_close("etl"), width=22).grid(row=1, column=1, padx=6, pady=6)

    root.mainloop()
    return choice["value"] or "offline"


def main():
    # Optional CLI: python run.py [offline|online|api|etl]
    mode = sys.argv[1].lower() if len(sys.argv) > 1 else prompt_mode_gui()
    if mode not in MODES:
        print(f"Invalid mode. Use one of: {', '.join(sorted(MODES))}.")
        sys.exit(1)

    if mode == "etl":
        sys.exit(subprocess.call([sys.executable, str(BACKEND_MAIN)], cwd=str(BACKEND_MAIN.parent)))

    api_proc = None
    try:
        if mode in ("online", "api"):
            if not BACKEND_API.exists():
                print("Backend API not found at:", BACKEND_API)
                sys.exit(1)
            print("Starting API at http://127.0.0.1:8000 ...")
            api_proc = subprocess.Popen([sys.executable, str(BACKEND_API)], cwd=str(BACKEND_API.parent))

        if mode in ("online", "offline"):
            if not FRONTEND_APP.exists():
                print("Frontend app not found at:", FRONTEND_APP)
                sys.exit(1)
            print("Launching Streamlit dashboard ...")

            # Start browser thread (only for GUI mode, not CLI)
            if len(sys.argv) == 1:
                browser_thread = threading.Thread(target=open_browser_delayed, daemon=True)
                browser_thread.start()

            code = subprocess.call([
                sys.executable, "-m", "streamlit", "run", str(FRONTEND_APP),
                "--server.headless", "true",
                "--browser.gatherUsageStats", "false",
                "--server.port", "8501"
            ], cwd=str(FRONTEND_APP.parent))
            sys.exit(code)
        else:
            # API-only mode: wait for CTRL+C
            print("API started. Press Ctrl+C to stop.")
            api_proc.wait()
    finally:
        if api_proc is not None and api_proc.poll() is None:
            api_proc.terminate()


if __name__ == "__main__":
    main()

import os
import sys
import subprocess

# ---------------- Config ----------------
APP_TITLE = "PR Parser"
TOAST_MS = 2000

INFO = "info"
ERROR = "error"


def is_running_from_app(argv=None) -> bool:
    """True when launched as a bundled app or with --app-mode."""
    if argv is None:
        argv = sys.argv[1:]
    return bool(getattr(sys, "frozen", False)) or "--app-mode" in argv


class Notifier:
    """
    Progress and result notices.

    Console mode prints to stderr. App mode uses a borderless always-on-top
    toast for progress and a messagebox for dialogs.
    """

    def __init__(self, app_mode=False, quiet=False):
        self.app_mode = app_mode
        self.quiet = quiet
        self.root = None
        self.toast = None

    def _ensure_root(self):
        if self.root is None:
            import tkinter as tk

            self.root = tk.Tk()
            self.root.withdraw()
            self.root.attributes('-topmost', True)
        return self.root

    def progress(self, message: str):
        if not self.app_mode:
            if not self.quiet:
                print(message, file=sys.stderr)
            return

        try:
            self.show_toast(message)
        except Exception as e:
            # no display; fall back to the console
            print(f"{message} (toast failed: {e})", file=sys.stderr)

    def show_toast(self, message: str):
        """Show a temporary toast message at the top-middle of the screen"""
        import tkinter as tk

        root = self._ensure_root()
        self.close_toast()

        toast = tk.Toplevel(root)
        toast.overrideredirect(True)
        toast.attributes('-topmost', True)
        toast.configure(bg='#2a2a2a')

        label = tk.Label(
            toast, text=message,
            bg='#2a2a2a', fg='#ffffff',
            font=('Segoe UI', 9),
            padx=15, pady=8
        )
        label.pack()

        toast.update_idletasks()
        screen_w = toast.winfo_screenwidth()
        x = max(0, (screen_w - toast.winfo_reqwidth()) // 2)
        toast.geometry(f"+{x}+0")

        self.toast = toast
        root.after(TOAST_MS, self.close_toast)
        root.update()

    def close_toast(self):
        if self.toast is not None:
            try:
                self.toast.destroy()
            except Exception:
                pass
            self.toast = None

    def dialog(self, message: str, title: str = APP_TITLE, kind: str = INFO):
        if not self.app_mode:
            mark = "❌" if kind == ERROR else "✅"
            print(f"{mark} {title}: {message}", file=sys.stderr)
            return

        try:
            from tkinter import messagebox

            root = self._ensure_root()
            self.close_toast()
            if kind == ERROR:
                messagebox.showerror(title, message, parent=root)
            else:
                messagebox.showinfo(title, message, parent=root)
        except Exception as e:
            print(f"{title}: {message} (dialog failed: {e})", file=sys.stderr)

    def close(self):
        self.close_toast()
        if self.root is not None:
            try:
                self.root.destroy()
            except Exception:
                pass
            self.root = None


def paste_result() -> bool:
    """Send the platform paste shortcut to the focused window."""
    if sys.platform == 'win32':
        import pythoncom  # pywin32
        import win32com.client  # pywin32

        pythoncom.CoInitialize()
        try:
            shell = win32com.client.Dispatch("WScript.Shell")
            shell.SendKeys("^v")
        finally:
            pythoncom.CoUninitialize()
        return True

    if sys.platform == 'darwin':
        script = 'tell application "System Events" to keystroke "v" using command down'
        proc = subprocess.run(
            ["osascript", "-e", script],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
        if proc.returncode != 0:
            err = proc.stderr.decode("utf-8", errors="replace").strip()
            print(f"Paste failed: {err}", file=sys.stderr)
            return False
        return True

    print(f"Paste not supported on {sys.platform} ({os.name})", file=sys.stderr)
    return False

import os
import subprocess
import sys
from PIL import Image

ICON_PNG = os.path.join("resources", "icon.png")
ICON_ICO = os.path.join("resources", "icon.ico")
ENTRY_POINT = "mortgage_calculator.py"


def prepare_icon(icon_png=ICON_PNG, icon_ico=ICON_ICO):
    """Convert the PNG app icon to ICO. Returns the .ico path or None."""
    if not os.path.exists(icon_png):
        print(f"Warning: {icon_png} not found")
        return None
    try:
        img = Image.open(icon_png)
        img.save(icon_ico, format='ICO', sizes=[(256, 256)])
        print(f"Converted {icon_png} to {icon_ico}")
        return icon_ico
    except OSError as e:
        print(f"Warning: Could not convert icon: {e}")
        return None


def nuitka_command(icon_ico=None):
    cmd = [
        sys.executable, "-m", "nuitka",
        "--standalone",
        "--enable-plugin=pyqt6",
        "--windows-console-mode=disable",  # GUI only
        "--lto=yes",
        "--deployment",
        "--show-progress",
        "--output-dir=build",
        "--output-filename=MortgageCalculator",
        "--include-package=mortgage_calc",
    ]
    if os.path.isdir("resources"):
        cmd.append("--include-data-dir=resources=resources")
    if icon_ico and os.path.exists(icon_ico):
        cmd.append(f"--windows-icon-from-ico={icon_ico}")
    cmd.append(ENTRY_POINT)
    return cmd


def build():
    print("Initializing Mortgage Calculator Build Sequence (Target: Windows)...")
    
    print("Preparing Icon...")
    cmd = nuitka_command(prepare_icon())

    print("\nExecuting Nuitka Build Command:")
    print(" ".join(cmd))
    print("\nThis process may take several minutes...")
    
    try:
        # Nuitka builds for the host platform only
        if os.name == 'nt':
            subprocess.check_call(cmd)
            print("\nBUILD SUCCESSFUL!")
            print(f"Artifacts located in: {os.path.abspath('build/mortgage_calculator.dist')}")
        else:
            print("\n[INFO] You are running on Linux.")
            print("To build for Windows, transfer this project to a Windows machine")
            print("and run: python build.py")
            print("(Ensure 'pip install -e .[build]' is run first)")
    except subprocess.CalledProcessError as e:
        print(f"\nBUILD FAILED with Code {e.returncode}")
        sys.exit(1)

if __name__ == "__main__":
    build()

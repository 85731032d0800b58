import os
import sys
import tempfile
import unittest

from PIL import Image

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import build


class TestBuildScript(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.png = os.path.join(self.tmp.name, "icon.png")
        self.ico = os.path.join(self.tmp.name, "icon.ico")

    def tearDown(self):
        self.tmp.cleanup()

    def test_prepare_icon_converts_png(self):
        Image.new("RGBA", (256, 256), (59, 130, 246, 255)).save(self.png)
        self.assertEqual(build.prepare_icon(self.png, self.ico), self.ico)
        self.assertTrue(os.path.exists(self.ico))

    def test_prepare_icon_missing_png(self):
        self.assertIsNone(build.prepare_icon(self.png, self.ico))

    def test_nuitka_command(self):
        cmd = build.nuitka_command()
        self.assertEqual(cmd[-1], build.ENTRY_POINT)
        self.assertIn("--enable-plugin=pyqt6", cmd)
        self.assertFalse(any(arg.startswith("--windows-icon-from-ico") for arg in cmd))

    def test_nuitka_command_with_icon(self):
        open(self.ico, "wb").close()
        cmd = build.nuitka_command(self.ico)
        self.assertIn(f"--windows-icon-from-ico={self.ico}", cmd)


if __name__ == '__main__':
    unittest.main()

"""Check that a checkout of the project is ready to run.

Walks a checklist of project files, declared and installed dependencies and
``.env`` variables, printing one coloured line per check, then exits with
status 1 if any required check failed.
"""

import argparse
import importlib.util
import re
import sys
from pathlib import Path
from typing import Dict, Iterable, Optional

from dotenv import dotenv_values

COLORS = {
    "reset": "\x1b[0m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "cyan": "\x1b[36m",
}

# distribution name -> import name
REQUIRED_PACKAGES: Dict[str, str] = {
    "fastapi": "fastapi",
    "stripe": "stripe",
    "sqlalchemy": "sqlalchemy",
    "python-jose": "jose",
    "python-dotenv": "dotenv",
    "pydantic": "pydantic",
}

REQUIRED_ENV_VARS = (
    "CLERK_PUBLISHABLE_KEY",
    "CLERK_SECRET_KEY",
    "CLERK_JWT_KEY",
    "DATABASE_URL",
    "STRIPE_SECRET_KEY",
)

PLACEHOLDER_MARKERS = ("your_", "xxxxxx")


def _normalize_dist_name(name: str) -> str:
    return re.sub(r"[-_.]+", "-", name).lower()


class SetupChecker:
    def __init__(self, root: Path, env_file: str = ".env", out=None, color: bool = True):
        self.root = root
        self.env_file = env_file
        self.out = out or sys.stdout
        self.color = color
        self.passed = 0
        self.failed = 0
        self.warnings = 0

    def _print(self, tag: str, color: str, message: str) -> None:
        if self.color:
            print(f"{COLORS[color]}[{tag}]{COLORS['reset']} {message}", file=self.out)
        else:
            print(f"[{tag}] {message}", file=self.out)

    def info(self, message: str) -> None:
        self._print("INFO", "blue", message)

    def success(self, message: str) -> None:
        self._print("SUCCESS", "green", message)

    def warning(self, message: str) -> None:
        self._print("WARNING", "yellow", message)

    def error(self, message: str) -> None:
        self._print("ERROR", "red", message)

    def step(self, message: str) -> None:
        self._print("STEP", "cyan", message)

    def _record(self, ok: bool, present: str, missing: str, required: bool) -> bool:
        if ok:
            self.success(present)
            self.passed += 1
        elif required:
            self.error(missing)
            self.failed += 1
        else:
            self.warning(f"{missing} (optional)")
            self.warnings += 1
        return ok

    def check_file(self, relative_path: str, description: str, required: bool = True) -> bool:
        self.step(f"Checking {description}...")
        ok = (self.root / relative_path).is_file()
        return self._record(ok, f"{description} found", f"{description} is missing", required)

    def check_directory(self, relative_path: str, description: str, required: bool = True) -> bool:
        self.step(f"Checking {description}...")
        ok = (self.root / relative_path).is_dir()
        return self._record(ok, f"{description} found", f"{description} is missing", required)

    def check_declared_dependencies(self, packages: Iterable[str] = REQUIRED_PACKAGES) -> bool:
        self.step("Checking dependencies declared in pyproject.toml...")
        pyproject = self.root / "pyproject.toml"
        if not pyproject.is_file():
            self.error("pyproject.toml is missing")
            self.failed += 1
            return False

        # Requirement names are the leading token of each quoted dependency string.
        text = pyproject.read_text(encoding="utf-8")
        declared = {
            _normalize_dist_name(match)
            for match in re.findall(r"[\"']\s*([A-Za-z0-9][A-Za-z0-9._-]*)\s*(?:\[[^\]]*\])?\s*(?:[<>=!~;]|[\"'])", text)
        }

        all_present = True
        for package in packages:
            ok = _normalize_dist_name(package) in declared
            self._record(ok, f"{package} is declared", f"{package} is not declared", required=True)
            all_present = all_present and ok
        return all_present

    def check_installed_packages(self, packages: Optional[Dict[str, str]] = None) -> bool:
        self.step("Checking installed packages...")
        all_installed = True
        for dist_name, import_name in (packages or REQUIRED_PACKAGES).items():
            ok = importlib.util.find_spec(import_name) is not None
            self._record(ok, f"{dist_name} is installed", f"{dist_name} is not installed", required=True)
            all_installed = all_installed and ok
        return all_installed

    def check_environment_variables(self, names: Iterable[str] = REQUIRED_ENV_VARS) -> bool:
        self.step("Checking environment variables...")
        env_path = self.root / self.env_file
        if not env_path.is_file():
            self.error(f"{self.env_file} is missing")
            self.failed += 1
            return False

        values = dotenv_values(env_path)
        all_configured = True
        for name in names:
            value = values.get(name)
            if value and not any(marker in value for marker in PLACEHOLDER_MARKERS):
                self.success(f"{name} is configured")
                self.passed += 1
            else:
                # Unset keys only degrade features, so they warn instead of failing.
                self.warning(f"{name} is not configured or uses a placeholder value")
                self.warnings += 1
                all_configured = False
        return all_configured

    def run(self) -> int:
        self._banner("Starter Lite - setup verification")

        self.check_file("pyproject.toml", "pyproject.toml")
        self.check_file(self.env_file, f"environment file ({self.env_file})")
        self.check_file("README.md", "README")

        self.check_directory("starter", "starter package")
        self.check_directory("tests", "tests directory")
        self.check_directory("supabase", "supabase directory", required=False)

        self.check_declared_dependencies()
        self.check_installed_packages()
        self.check_environment_variables()

        self.check_file("alembic.ini", "Alembic configuration", required=False)
        self.check_file(".gitignore", ".gitignore", required=False)

        self._banner("Results")
        self.success(f"Passed: {self.passed}")
        if self.warnings:
            self.warning(f"Warnings: {self.warnings}")
        if self.failed:
            self.error(f"Failed: {self.failed}")
        print(file=self.out)

        if self.failed == 0:
            self.success("Project setup looks good.")
            self.info("Start the development server with:")
            print("  uvicorn starter.main:app --reload", file=self.out)
        else:
            self.error("Project setup has problems; fix the errors above and run this again.")
        if self.warnings:
            self.info("Warnings are optional configuration and do not block basic use.")
        print(file=self.out)

        return 1 if self.failed else 0

    def _banner(self, title: str) -> None:
        rule = "=" * 50
        if self.color:
            print(f"{COLORS['blue']}{rule}\n    {title}\n{rule}{COLORS['reset']}", file=self.out)
        else:
            print(f"{rule}\n    {title}\n{rule}", file=self.out)


def main(argv: Optional[list] = None) -> int:
    """CLI entrypoint for the setup checklist."""

    parser = argparse.ArgumentParser(description="Verify the project setup.")
    parser.add_argument("--root", type=Path, default=Path.cwd(), help="project root to inspect")
    parser.add_argument("--env-file", default=".env")
    parser.add_argument("--no-color", action="store_true")
    args = parser.parse_args(argv)

    checker = SetupChecker(args.root, env_file=args.env_file, color=not args.no_color)
    return checker.run()


if __name__ == "__main__":
    sys.exit(main())

"""Configuration constants.

This module contains values that should NOT be user-configurable: process
control timings and the fixed markers go test and go vet print.

For configurable values, see models.py (TestingConfig, CrossTargetConfig, etc.).
"""

# =============================================================================
# Process Control
# =============================================================================

DEADLINE_GRACE_SEC = 10
"""Seconds added to -timeout before the process deadline fires.

go test's own -timeout panics with a stack trace naming the running tests;
the outer deadline only exists for hangs that survive it."""

KILL_GRACE_SEC = 5.0
"""Seconds between SIGINT and SIGKILL once a deadline fires."""

# =============================================================================
# Result Cache
# =============================================================================

CACHE_KEY_LENGTH = 16
"""Hex characters kept from the content hash."""

DIFF_DIGEST_LENGTH = 8
"""Hex characters kept from the working-tree digest inside the key."""

# =============================================================================
# go tool output markers
# =============================================================================

EXCLUSION_MARKERS = (
    "matched no packages",
    "build constraints exclude all Go files",
)
"""Output meaning a target has nothing to build, not that something broke."""

VET_EMPTY_MARKERS = (
    "matched no packages",
    "no packages to vet",
    "build constraints exclude all Go files",
)
"""go vet output that means there was nothing to analyze."""

VET_BENIGN_PATTERNS = ("possible misuse of unsafe.Pointer",)
"""go vet diagnostics ignored when deciding whether vet found issues."""

SETUP_FAILED_MARKER = "[setup failed]"
BUILD_FAILED_MARKER = "[build failed]"
NO_TEST_FILES_MARKER = "[no test files]"

LIST_TEST_FILES_FORMAT = "{{.ImportPath}} {{.TestGoFiles}} {{.XTestGoFiles}}"
"""go list template: one line per package with its bracketed test files."""

LIST_TEST_PATHS_FORMAT = (
    "{{range .TestGoFiles}}{{$.Dir}}/{{.}} {{end}}{{range .XTestGoFiles}}{{$.Dir}}/{{.}} {{end}}"
)
"""go list template: absolute test file paths, space separated."""

"""This example builds a typical C project:
- All .c files under src/ build into one executable, with both debug and release modes
- It uses a vendored zlib checked in under vendor/zlib/
- On Windows it also links against the system socket library

Run it with eg. `cbuild -f examples/c.Buildfile.py --mode release --verbose`
"""

NAME = "myproject"
EXE = ".exe" if system is WINDOWS else ""

def zlib(lib, mode, system):
	lib.include_dir("include")
	lib.library_dir("lib")
	lib.link_flags("-lz")

def winsock(lib, mode, system):
	if system is WINDOWS:
		lib.link_flags("-lws2_32")

@default
@target(NAME, f"build/{NAME}{EXE}")
def myproject(t, mode, system):
	t.describe("The main executable")
	t.source_dir("src")
	t.compile_flags("-Wall")
	if mode is DEBUG:
		t.compile_flags("-Og -g")
	else:
		t.compile_flags("-O3 -DNDEBUG")
	t.use_library(zlib, "vendor/zlib/")
	t.use_library(winsock)

# Same sources with the test harness added, built only when named explicitly
def tests(t, mode, system):
	myproject.func(t, mode, system)
	t.source_dir("tests")
	t.compile_flags("-DTESTING")

add_target("tests", f"build/{NAME}-tests{EXE}", tests)
log(f"Registered targets for {system.value}")

import argh

from .main import main

# Need a seperate callable for when run via setuptools
def entrypoint(argv=None):
	argh.dispatch_command(main, argv=argv)

if __name__ == '__main__':
	entrypoint()

from setuptools import setup, find_packages

setup(
	name='cbuild',
	version='0.0.1',
	author='cbuild contributors',
	description='Resolve declarative C build targets into a compiler invocation',
	packages=find_packages(exclude=['tests', 'tests.*']),
	python_requires='>=3.10',
	install_requires=[
		'argh',
	],
	extras_require={
		'test': ['pytest'],
	},
	entry_points = {
		'console_scripts': ['cbuild=cbuild.__main__:entrypoint'],
	},
)

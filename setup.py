from setuptools import setup, find_packages, Command
import pathlib
import subprocess

here = pathlib.Path(__file__).parent.resolve()

version_file = here / 'VERSION'

# Get the long description from the README file
long_description = (here / 'README.md').read_text(encoding='utf-8')

REQUIREMENTS = [
    'numpy>=1.26',
]


def format_git_describe_version(version):
    if '-' in version:
        splitted = version.split('-')
        tag = splitted[0]
        index = f"dev{splitted[1]}"
        return f"{tag}.{index}"
    else:
        return version


def get_version_from_git():
    try:
        process = subprocess.run(["git", "describe"], cwd=str(here), check=True, capture_output=True)
        version = process.stdout.decode('utf-8').strip()
        version = format_git_describe_version(version)
        with version_file.open('w') as f:
            f.write(version)
        return version
    except (subprocess.CalledProcessError, OSError):
        if version_file.exists():
            return version_file.read_text().strip()
        else:
            return '0.1.0'


version = get_version_from_git()


class GetVersionCommand(Command):
    """A custom command to get the current project version inferred from git describe."""

    description = 'gets the project version from git describe'
    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        print(version)


setup(
    name='limit',  # Required
    version=version,
    description='Limit (clamp) values using slice syntax as range literals',
    license='Apache 2.0 License',
    long_description=long_description,
    long_description_content_type='text/markdown',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Libraries',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
    ],
    keywords='limit, clamp, range, bounds, float, nan',  # Optional
    packages=find_packages('.', exclude=('test', 'test.*')),  # Required
    include_package_data=True,
    python_requires='>=3.9.0',
    install_requires=REQUIREMENTS,  # Optional
    zip_safe=False,
    platforms="Independant",
    cmdclass={
        'get_project_version': GetVersionCommand,
    },
)

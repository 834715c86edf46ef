"""chainmc -- generic Markov chain Monte Carlo sampling"""
import os
import shutil

from setuptools import Command, find_packages, setup


# custom clean command to remove build artifacts
# taken from sklearn setup.py
class clean(Command):
    description = "Remove build artifacts from the source tree"

    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        if os.path.exists("build"):
            shutil.rmtree("build")
        for dirpath, dirnames, filenames in os.walk("chainmc"):
            for filename in filenames:
                _, extension = os.path.splitext(filename)
                if extension in [".pyc"]:
                    os.unlink(os.path.join(dirpath, filename))

            for dirname in dirnames:
                if dirname == "__pycache__":
                    shutil.rmtree(os.path.join(dirpath, dirname))


cmdclass = {
    "clean": clean,
}

setup(
    name="chainmc",
    version="0.1.0",
    description="Generic Markov chain Monte Carlo sampling with anytime semantics.",
    python_requires=">=3.9",
    packages=find_packages(include=["chainmc", "chainmc.*"]),
    install_requires=[
        "numpy",
        "monty",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    cmdclass=cmdclass,
)

from setuptools import setup
import os


def parse_requirements(name):
    path = os.path.join(os.path.dirname(__file__), "prio", "queue",
                        "requirements", name)
    reqs = []
    with open(path, "r") as fin:
        for r in fin.read().split("\n"):
            r = r.strip()
            if r.startswith("#") or not r:
                continue
            if r.startswith("git+"):
                print("Warning: git dependencies cannot be used in setuptools "
                      "(%s)" % r)
                continue
            if not r.startswith("-r"):
                reqs.append(r)
    return reqs


setup(
    name="prio-queue",
    description="Minimum priority queue backed by a binary heap",
    version="1.0.0",
    license="BSD",
    packages=["prio.queue"],
    install_requires=parse_requirements("base.txt"),
    extras_require={"test": parse_requirements("test.txt")},
    package_data={"prio.queue": ["requirements/base.txt",
                                 "requirements/test.txt"]},
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3"
    ]
)

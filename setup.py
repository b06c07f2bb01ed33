import setuptools
from pathlib import Path

ROOT = Path(__file__).parent


def read_requirements(filename: str = "requirements.txt") -> list[str]:
    req_path = ROOT / filename
    if not req_path.exists():
        return []
    reqs: list[str] = []
    for line in req_path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        reqs.append(line)
    return reqs


long_description = (ROOT / "README_PYPI.md").read_text(encoding="utf-8")

setuptools.setup(
    name="fastmatrix",
    version="0.1.0",  # PEP 440 compliant
    author="keywind",
    author_email="watersprayer127@gmail.com",
    description=(
        "FastMatrix provides dense rank-N matrices backed by a single typed "
        "contiguous buffer, with row-major addressing, index-set subsets, "
        "diagonal helpers and record/JSON serialization."
    ),
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="Apache-2.0",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=read_requirements(),
    extras_require={"test": ["pytest"]},
    include_package_data=True,
    zip_safe=False,
)

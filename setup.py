from setuptools import setup

with open("requirements.txt", "r") as f:
    install_requires = [s for s in f.read().splitlines() if s and not s.startswith("--")]

setup(
    name="exprtex",
    version="0.1.0",
    description="Convert simple math expressions into LaTeX",
    packages=["exprtex"],
    install_requires=install_requires,
    extras_require={"test": ["pytest"]},
    python_requires=">=3.7",
    package_dir={"exprtex": "./exprtex"},
    zip_safe=False
)

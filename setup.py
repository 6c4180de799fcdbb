from setuptools import setup, find_packages


setup(name='andor',
      version='0.1.0',
      package_dir={"": "src"},
      description='AND-OR graph search for conditional plans in nondeterministic domains',
      license="MIT",
      packages=find_packages(where="src"),
      python_requires=">=3.9",
      install_requires=[
          "rich",
          "rich-click",
      ],
      extras_require={
          "test": [
              "pytest",
              "click",
          ],
      },
      entry_points={
          "console_scripts": [
              "andor=andor.cli:main",
          ],
      })

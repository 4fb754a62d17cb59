from setuptools import setup, find_packages

setup(
    name='k8s-controller',
    version='0.1.0',
    packages=find_packages(),
    include_package_data=True,
    install_requires=[
        'typer[all]',
        'fastapi',
        'uvicorn',
        'kubernetes',
        'PyYAML',
        'urllib3',
        'python-dotenv',
    ],
    extras_require={
        'test': [
            'pytest',
            'jsonschema',
            'httpx',
        ]
    },
    entry_points={
        'console_scripts': [
            'k8s-controller=k8s_controller.cli:app'
        ]
    },
    author='Your Name',
    description='A CLI for inspecting Kubernetes deployments and API connectivity',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.8',
)

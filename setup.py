from setuptools import find_namespace_packages, setup

# Installation en mode développement :
#   pip install -e .[test]
#   uvicorn backend.app:app --reload

setup(
    name='VehicleRC',
    version='1.0',
    description="Gestion des cartes grises (RC) de véhicules avec export PDF",
    packages=find_namespace_packages(include=['backend', 'backend.*'], exclude=['backend.tests', 'backend.tests.*']),
    python_requires='>=3.10',
    install_requires=[
        'fastapi>=0.110',
        'uvicorn>=0.27',
        'pydantic>=2.5',
        'reportlab>=4.0',
        'Pillow>=10.0',
    ],
    extras_require={
        'test': ['pytest>=7.4', 'httpx>=0.26'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'Framework :: FastAPI',
    ],
)

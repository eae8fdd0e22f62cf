from setuptools import find_packages, setup

package_name = 'delta_kinematics'

setup(
    name=package_name,
    version='1.0.0',
    packages=find_packages(exclude=['test']),
    install_requires=['setuptools', 'numpy'],
    zip_safe=True,
    description='Inverse and forward position kinematics for a revolute-input delta robot',
    license='GPL-3.0-or-later',
    python_requires='>=3.8',
    extras_require={
        'test': [
            'pytest',
        ],
    },
)

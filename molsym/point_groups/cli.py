import argparse
from typing import List

from molsym import __version__
from molsym.atoms import read_atoms
from molsym.parameters import choices, default_parameters
from molsym.point_groups.check import MoleculeClassifier


def main(argv: List[str] = None) -> None:
    parser = argparse.ArgumentParser(
        prog='molsym',
        description='Simplified point-group classification of a molecule.')
    add = parser.add_argument
    add('file', metavar='input-file',
        help='Structure file (any format ase.io.read() understands).')
    add('-i', '--index', default='-1',
        help='Image to read from a trajectory (default: last).')
    add('-f', '--format', help='File format (default: guess).')
    add('-g', '--grouping', choices=choices['grouping'],
        default=default_parameters['grouping'])
    add('-a', '--axes', choices=choices['axes'],
        default=default_parameters['axes'],
        help='Rotation search (default: z).')
    add('--inversion', choices=choices['inversion'],
        default=default_parameters['inversion'])
    add('--no-trivial-rotation', action='store_true',
        help='Do not accept the identity as a rotation.')
    add('-t', '--tolerance', type=float,
        help='Absolute tolerance (default: 1e-6 or $MOLSYM_TOLERANCE).')
    add('--groups', action='store_true',
        help='Show result for each element group.')
    add('--txt', help='Write log to file ("-" for stdout).')
    add('--version', action='version', version=f'%(prog)s-{__version__}')
    args = parser.parse_args(argv)

    kwargs = dict(grouping=args.grouping,
                  axes=args.axes,
                  inversion=args.inversion,
                  trivial_rotation=not args.no_trivial_rotation)
    if args.tolerance is not None:
        kwargs['tolerance'] = args.tolerance

    atoms = read_atoms(args.file, index=int(args.index), format=args.format)
    classifier = MoleculeClassifier(txt=args.txt, **kwargs)

    results = classifier.group_results(atoms)
    if args.groups:
        for symbol, result in results:
            print(f'{symbol:4} {result or "-"}')

    print('Point group:', classifier.select(results))

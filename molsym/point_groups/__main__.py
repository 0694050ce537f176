from molsym.point_groups.cli import main

if __name__ == '__main__':
    main()

from mortgage_calc.main import main

main()
